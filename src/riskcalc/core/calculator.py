"""
Session de calcul: conserve les derniers paramètres saisis, le dernier
résultat et le dernier message d'erreur à afficher
"""

from dataclasses import replace
from typing import Dict, List, Optional

from riskcalc.core.models import TradeParameters, CalculationResult, FIELD_ALIASES
from riskcalc.core.exceptions import CalculationError
from riskcalc.core.calculations import calculate_position_size
from riskcalc.core.scenarios import build_scenarios, RiskRewardScenario, RATIO_THRESHOLDS, DEFAULT_SCENARIO_RATIOS
from riskcalc.core.logger import log_debug, log_warning, log_calculation

class PositionCalculator:
    """
    Calculateur de position avec état

    Les erreurs de saisie ne sont pas propagées: le message est conservé
    dans `error` et le résultat est effacé.
    """

    def __init__(self, config: Optional[dict] = None):
        """
        Initialise le calculateur

        Args:
            config: Section 'calculator' de la configuration, plus les seuils R:R
        """
        config = config or {}
        self.scenario_ratios = tuple(config.get('scenario_ratios', DEFAULT_SCENARIO_RATIOS))
        self.ratio_thresholds = dict(config.get('ratio_thresholds', RATIO_THRESHOLDS))

        self.trade_parameters = TradeParameters(
            total_capital=config.get('default_total_capital', 0),
            risk_percentage=config.get('default_risk_percentage', 1),
            entry_price=0,
            stop_loss_price=0,
            take_profit_price=None
        )
        self.calculation_result: Optional[CalculationResult] = None
        self.error: Optional[str] = None
        self.last_parameters: Optional[TradeParameters] = None

    def update_trade_parameter(self, name: str, value: Optional[float]):
        """
        Met à jour un paramètre du trade

        Args:
            name: Nom du champ (camelCase du formulaire ou snake_case)
            value: Nouvelle valeur, None pour retirer le take profit
        """
        field = FIELD_ALIASES.get(name, name)
        if field not in FIELD_ALIASES.values():
            raise KeyError(f"Paramètre inconnu: {name}")
        self.trade_parameters = replace(self.trade_parameters, **{field: value})
        log_debug("Paramètre mis à jour", name=field, value=value)

    def update_trade_parameters(self, values: Dict[str, Optional[float]]):
        for name, value in values.items():
            self.update_trade_parameter(name, value)

    def calculate(self, total_capital: Optional[float] = None,
                  risk_percentage: Optional[float] = None) -> Optional[CalculationResult]:
        """
        Calcule la position avec les paramètres courants

        Capital et risque peuvent être surchargés pour ce calcul seulement,
        sans modifier les valeurs par défaut de la session.

        Returns:
            Le résultat, ou None si les paramètres sont invalides
        """
        params = self.trade_parameters
        if total_capital is not None:
            params = replace(params, total_capital=total_capital)
        if risk_percentage is not None:
            params = replace(params, risk_percentage=risk_percentage)

        try:
            result = calculate_position_size(params)
        except CalculationError as e:
            self.calculation_result = None
            self.error = str(e)
            log_warning(f"Calcul impossible: {self.error}")
            return None

        self.calculation_result = result
        self.error = None
        self.last_parameters = params
        log_calculation(params, result)
        return result

    def scenarios(self) -> List[RiskRewardScenario]:
        """Scénarios R:R du dernier calcul réussi, liste vide sinon"""
        if self.calculation_result is None:
            return []
        return build_scenarios(
            self.last_parameters,
            self.calculation_result,
            self.scenario_ratios,
            self.ratio_thresholds
        )
