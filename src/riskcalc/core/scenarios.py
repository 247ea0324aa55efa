"""
Scénarios risque/rendement et qualification du ratio R:R
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from riskcalc.core.models import TradeParameters, CalculationResult
from riskcalc.core.calculations import calculate_take_profit_price
from riskcalc.utils.formatters import format_to_two_decimals

# Seuils de qualité du ratio R:R
RATIO_THRESHOLDS = {
    'good': 2.0,
    'decent': 1.0
}

DEFAULT_SCENARIO_RATIOS = (1, 2, 3)


class RatioQuality(Enum):
    """Qualité d'un ratio risque/rendement"""
    EXCELLENT = "excellent"
    ACCEPTABLE = "acceptable"
    POOR = "improve"
    NONE = "no data"


@dataclass(frozen=True)
class RiskRewardScenario:
    """Un scénario 'what-if' pour un ratio R:R donné"""
    ratio: float
    label: str
    take_profit_price: float
    potential_profit: float
    potential_loss: float
    profit_percentage: float  # gain en % du capital
    quality: RatioQuality


def _trim(value: float) -> str:
    return f"{value:.2f}".rstrip('0').rstrip('.')


def classify_ratio(ratio: float, thresholds: Optional[Dict[str, float]] = None) -> RatioQuality:
    """
    Qualifie un ratio R:R

    Args:
        ratio: Ratio risque/rendement
        thresholds: Seuils 'good' et 'decent' (RATIO_THRESHOLDS par défaut)

    Returns:
        RatioQuality
    """
    thresholds = thresholds or RATIO_THRESHOLDS
    if ratio >= thresholds['good']:
        return RatioQuality.EXCELLENT
    if ratio >= thresholds['decent']:
        return RatioQuality.ACCEPTABLE
    if ratio > 0:
        return RatioQuality.POOR
    return RatioQuality.NONE


def format_ratio(ratio: float) -> str:
    """Affiche un ratio sous la forme 1:x, '--' sans ratio"""
    if ratio <= 0:
        return "--"
    return f"1:{_trim(format_to_two_decimals(ratio))}"


def break_even_win_rate(ratio: float) -> float:
    """Taux de réussite (%) nécessaire pour être à l'équilibre avec ce ratio"""
    if ratio <= 0:
        return 0.0
    return 100 / (1 + ratio)


def risk_reward_bars(result: CalculationResult) -> Tuple[float, float]:
    """
    Largeurs relatives (%) des barres risque et rendement

    Returns:
        (largeur risque, largeur rendement), somme = 100
    """
    ratio = result.risk_reward_ratio
    if ratio <= 0:
        return 100.0, 0.0
    risk_width = (1 / (1 + ratio)) * 100
    return risk_width, 100 - risk_width


def build_scenarios(params: TradeParameters, result: CalculationResult,
                    ratios: Sequence[float] = DEFAULT_SCENARIO_RATIOS,
                    thresholds: Optional[Dict[str, float]] = None) -> List[RiskRewardScenario]:
    """
    Construit les scénarios take profit pour plusieurs ratios R:R

    Le gain de chaque scénario vaut la perte potentielle multipliée par le
    ratio, le prix cible est dérivé du stop loss.

    Args:
        params: Paramètres du trade calculé
        result: Résultat du calcul de position
        ratios: Ratios à simuler
        thresholds: Seuils de qualité

    Returns:
        Liste de RiskRewardScenario dans l'ordre des ratios
    """
    scenarios = []
    for ratio in ratios:
        take_profit_price = calculate_take_profit_price(
            params.entry_price,
            params.stop_loss_price,
            ratio
        )
        potential_profit = result.potential_loss * ratio
        scenarios.append(RiskRewardScenario(
            ratio=ratio,
            label=f"1:{_trim(ratio)}",
            take_profit_price=take_profit_price,
            potential_profit=potential_profit,
            potential_loss=result.potential_loss,
            profit_percentage=(potential_profit / params.total_capital) * 100,
            quality=classify_ratio(ratio, thresholds)
        ))
    return scenarios


def scenarios_to_frame(scenarios: List[RiskRewardScenario]) -> pd.DataFrame:
    """Convertit les scénarios en DataFrame indexé par libellé"""
    columns = [
        'label', 'ratio', 'take_profit_price', 'potential_profit',
        'potential_loss', 'profit_percentage', 'quality'
    ]
    if not scenarios:
        return pd.DataFrame(columns=columns).set_index('label')

    rows = []
    for scenario in scenarios:
        row = asdict(scenario)
        row['quality'] = scenario.quality.value
        rows.append(row)
    return pd.DataFrame(rows, columns=columns).set_index('label')
