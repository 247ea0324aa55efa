"""
Validation des paramètres de trade avant tout calcul
"""

import numpy as np

from riskcalc.core.models import TradeParameters, Direction
from riskcalc.core.exceptions import (
    InvalidParameterError,
    EqualPricesError,
    WrongDirectionError
)

OUT_OF_RANGE_MESSAGE = "All inputs must be positive numbers. Risk % must be between 0 and 100."
EQUAL_PRICES_MESSAGE = "Entry price and stop loss price cannot be equal."
LONG_TAKE_PROFIT_MESSAGE = "Take profit price must be above entry price for long positions."
SHORT_TAKE_PROFIT_MESSAGE = "Take profit price must be below for short positions."
TAKE_PROFIT_RANGE_MESSAGE = "Take profit price must be a positive number."


def validate_trade_parameters(params: TradeParameters) -> None:
    """
    Vérifie qu'un jeu de paramètres peut produire un calcul

    Args:
        params: Paramètres du trade

    Raises:
        InvalidParameterError: Valeur non finie, négative ou risque hors de ]0, 100]
        EqualPricesError: Prix d'entrée égal au stop loss
        WrongDirectionError: Take profit du mauvais côté du prix d'entrée
    """
    values = np.array([
        params.total_capital,
        params.risk_percentage,
        params.entry_price,
        params.stop_loss_price
    ], dtype=float)

    if (
        not np.isfinite(values).all()
        or params.total_capital <= 0
        or params.risk_percentage <= 0
        or params.risk_percentage > 100
        or params.entry_price <= 0
        or params.stop_loss_price <= 0
    ):
        raise InvalidParameterError(OUT_OF_RANGE_MESSAGE)

    if params.entry_price == params.stop_loss_price:
        raise EqualPricesError(EQUAL_PRICES_MESSAGE)

    if not params.has_take_profit:
        return

    take_profit = params.take_profit_price
    if not np.isfinite(take_profit) or take_profit < 0:
        raise InvalidParameterError(TAKE_PROFIT_RANGE_MESSAGE)

    if params.direction == Direction.LONG and take_profit < params.entry_price:
        raise WrongDirectionError(LONG_TAKE_PROFIT_MESSAGE)
    if params.direction == Direction.SHORT and take_profit > params.entry_price:
        raise WrongDirectionError(SHORT_TAKE_PROFIT_MESSAGE)
