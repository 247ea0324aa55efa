"""
Moteur de calcul de taille de position

Fonctions pures: aucun état, aucun log. Les erreurs de saisie sont levées
sous forme de CalculationError et remontent directement à l'appelant.
"""

import numpy as np

from riskcalc.core.models import TradeParameters, CalculationResult, Direction, infer_direction
from riskcalc.core.validation import validate_trade_parameters, EQUAL_PRICES_MESSAGE
from riskcalc.core.exceptions import (
    InvalidParameterError,
    EqualPricesError,
    WrongDirectionError,
    PriceDistanceError,
    InvalidRatioError
)
from riskcalc.utils.formatters import convert_to_decimal


def calculate_position_size(params: TradeParameters) -> CalculationResult:
    """
    Calcule la taille de position selon les paramètres de gestion du risque

    La taille est choisie pour qu'un stop loss touché fasse perdre exactement
    le montant risqué: position_size * stop_loss_percentage == potential_loss.

    Args:
        params: Paramètres du trade (take profit optionnel)

    Returns:
        CalculationResult avec taille, perte, gain potentiel et ratio R:R
        (gain et ratio à 0 sans take profit). Aucun arrondi n'est appliqué.
    """
    validate_trade_parameters(params)

    max_loss_amount = risk_amount(params.total_capital, params.risk_percentage)
    stop_loss_percent = stop_loss_percentage(params.stop_loss_price, params.entry_price)

    position_size = max_loss_amount / stop_loss_percent

    potential_profit = 0.0
    risk_reward_ratio = 0.0
    if params.has_take_profit:
        take_profit_percent = take_profit_percentage(params.take_profit_price, params.entry_price)
        potential_profit = position_size * take_profit_percent
        risk_reward_ratio = take_profit_percent / stop_loss_percent

    return CalculationResult(
        position_size=position_size,
        potential_loss=max_loss_amount,
        potential_profit=potential_profit,
        risk_reward_ratio=risk_reward_ratio
    )


def calculate_take_profit_price(entry_price: float, stop_loss_price: float,
                                risk_reward_ratio: float) -> float:
    """
    Calcule le prix de take profit correspondant à un ratio risque/rendement

    Args:
        entry_price: Prix d'entrée
        stop_loss_price: Prix du stop loss
        risk_reward_ratio: Ratio visé (2 = 1:2)

    Returns:
        Prix de take profit, au-dessus de l'entrée en long et en dessous en short
    """
    if not np.isfinite([entry_price, stop_loss_price, risk_reward_ratio]).all():
        raise InvalidParameterError("All inputs must be finite numbers.")
    if entry_price <= 0 or stop_loss_price <= 0:
        raise InvalidParameterError("Entry price and stop loss price must be positive numbers.")
    if entry_price == stop_loss_price:
        raise EqualPricesError(EQUAL_PRICES_MESSAGE)
    if risk_reward_ratio <= 0:
        raise InvalidRatioError("Risk-reward ratio must be a positive number.")

    stop_loss_distance = price_distance(stop_loss_price, entry_price)
    take_profit_distance = stop_loss_distance * risk_reward_ratio

    if infer_direction(entry_price, stop_loss_price) == Direction.LONG:
        take_profit_price = entry_price + take_profit_distance
        if take_profit_price <= entry_price:
            raise WrongDirectionError("Calculated take profit must be above entry price for long positions.")
    else:
        take_profit_price = entry_price - take_profit_distance
        if take_profit_price >= entry_price:
            raise WrongDirectionError("Calculated take profit must be below entry price for short positions.")

    return take_profit_price


def risk_amount(total_capital: float, risk_percentage: float) -> float:
    """Montant risqué: part du capital correspondant au pourcentage de risque"""
    return total_capital * convert_to_decimal(risk_percentage)


def stop_loss_percentage(stop_loss_price: float, entry_price: float) -> float:
    """
    Distance du stop loss rapportée au prix d'entrée

    Returns:
        |stop_loss_price - entry_price| / entry_price
    """
    if stop_loss_price <= 0 or entry_price <= 0:
        raise PriceDistanceError("Stop loss price and entry price must be positive numbers")
    if stop_loss_price == entry_price:
        raise PriceDistanceError("Stop loss price cannot be equal to entry price")

    return price_distance(stop_loss_price, entry_price) / entry_price


def take_profit_percentage(take_profit_price, entry_price: float) -> float:
    """Distance du take profit rapportée au prix d'entrée, 0 sans objectif"""
    if take_profit_price is None or take_profit_price == 0:
        return 0.0
    return price_distance(take_profit_price, entry_price) / entry_price


def price_distance(begin_price: float, end_price: float) -> float:
    """
    Distance absolue entre deux prix

    Raises:
        PriceDistanceError: Prix négatif ou nul, ou prix identiques
    """
    if begin_price <= 0 or end_price <= 0:
        raise PriceDistanceError("Either price must be positive numbers")
    if begin_price == end_price:
        raise PriceDistanceError("Both prices cannot be equal")
    return abs(begin_price - end_price)
