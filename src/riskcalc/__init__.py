"""
RiskCalc - Calculateur de taille de position et de risque par trade
"""

__version__ = "1.0.0"

from riskcalc.core.calculations import calculate_position_size, calculate_take_profit_price
from riskcalc.core.exceptions import CalculationError
from riskcalc.core.models import TradeParameters, CalculationResult, Direction

__all__ = [
    'calculate_position_size',
    'calculate_take_profit_price',
    'CalculationError',
    'TradeParameters',
    'CalculationResult',
    'Direction'
]
