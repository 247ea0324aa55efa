"""
Modèles de données du calculateur de position
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


class Direction(Enum):
    """Sens du trade"""
    LONG = 1
    SHORT = -1


def infer_direction(entry_price: float, stop_loss_price: float) -> Direction:
    """
    Déduit le sens du trade à partir du stop loss

    Un stop sous le prix d'entrée signifie une position longue,
    sinon la position est courte.
    """
    return Direction.LONG if stop_loss_price < entry_price else Direction.SHORT


# Correspondance des noms de champs du formulaire (camelCase) vers les attributs
FIELD_ALIASES = {
    'totalCapital': 'total_capital',
    'riskPercentage': 'risk_percentage',
    'entryPrice': 'entry_price',
    'stopLossPrice': 'stop_loss_price',
    'takeProfitPrice': 'take_profit_price',
}


@dataclass(frozen=True)
class TradeParameters:
    """Paramètres d'un trade fournis par l'utilisateur"""
    total_capital: float
    risk_percentage: float  # 5 = 5% du capital
    entry_price: float
    stop_loss_price: float
    take_profit_price: Optional[float] = None

    @property
    def has_take_profit(self) -> bool:
        """Vrai si un objectif de prix exploitable est fourni (None et 0 = pas d'objectif)"""
        return self.take_profit_price is not None and self.take_profit_price != 0

    @property
    def direction(self) -> Direction:
        return infer_direction(self.entry_price, self.stop_loss_price)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TradeParameters':
        """
        Construit les paramètres depuis un dictionnaire

        Args:
            data: Valeurs indexées en camelCase (formulaire) ou snake_case

        Returns:
            TradeParameters
        """
        values = {FIELD_ALIASES.get(key, key): value for key, value in data.items()}
        return cls(
            total_capital=values['total_capital'],
            risk_percentage=values['risk_percentage'],
            entry_price=values['entry_price'],
            stop_loss_price=values['stop_loss_price'],
            take_profit_price=values.get('take_profit_price'),
        )


@dataclass(frozen=True)
class CalculationResult:
    """Résultat du calcul de taille de position"""
    position_size: float
    potential_loss: float
    potential_profit: float
    risk_reward_ratio: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
