"""Core modules for the position size calculator"""

from .models import TradeParameters, CalculationResult, Direction, infer_direction
from .exceptions import (
    CalculationError,
    InvalidParameterError,
    EqualPricesError,
    WrongDirectionError,
    PriceDistanceError,
    InvalidRatioError
)
from .validation import validate_trade_parameters
from .calculations import (
    calculate_position_size,
    calculate_take_profit_price,
    price_distance,
    stop_loss_percentage,
    take_profit_percentage,
    risk_amount
)
from .scenarios import (
    RATIO_THRESHOLDS,
    RatioQuality,
    RiskRewardScenario,
    classify_ratio,
    format_ratio,
    break_even_win_rate,
    build_scenarios,
    risk_reward_bars,
    scenarios_to_frame
)
from .calculator import PositionCalculator
from .logger import log_info, log_error, log_warning, log_debug

__all__ = [
    'TradeParameters',
    'CalculationResult',
    'Direction',
    'infer_direction',
    'CalculationError',
    'InvalidParameterError',
    'EqualPricesError',
    'WrongDirectionError',
    'PriceDistanceError',
    'InvalidRatioError',
    'validate_trade_parameters',
    'calculate_position_size',
    'calculate_take_profit_price',
    'price_distance',
    'stop_loss_percentage',
    'take_profit_percentage',
    'risk_amount',
    'RATIO_THRESHOLDS',
    'RatioQuality',
    'RiskRewardScenario',
    'classify_ratio',
    'format_ratio',
    'break_even_win_rate',
    'build_scenarios',
    'risk_reward_bars',
    'scenarios_to_frame',
    'PositionCalculator',
    'log_info',
    'log_error',
    'log_warning',
    'log_debug'
]
