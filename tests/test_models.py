"""
Tests des modèles de données
"""

import dataclasses

import pytest

from riskcalc.core.models import TradeParameters, CalculationResult, Direction, infer_direction


class TestTradeParameters:

    def test_direction_inferred_from_stop(self, long_params, short_params):
        assert long_params.direction == Direction.LONG
        assert short_params.direction == Direction.SHORT
        assert infer_direction(100, 90) == Direction.LONG
        assert infer_direction(100, 110) == Direction.SHORT

    @pytest.mark.parametrize("take_profit, expected", [
        (None, False),
        (0, False),
        (3245, True),
    ])
    def test_has_take_profit(self, long_params, take_profit, expected):
        params = dataclasses.replace(long_params, take_profit_price=take_profit)
        assert params.has_take_profit is expected

    def test_is_immutable(self, long_params):
        with pytest.raises(dataclasses.FrozenInstanceError):
            long_params.entry_price = 10

    def test_from_dict_camel_case(self):
        params = TradeParameters.from_dict({
            'totalCapital': 200,
            'riskPercentage': 5,
            'entryPrice': 2450,
            'stopLossPrice': 2185,
            'takeProfitPrice': 3245,
        })
        assert params == TradeParameters(200, 5, 2450, 2185, 3245)

    def test_from_dict_snake_case_without_target(self):
        params = TradeParameters.from_dict({
            'total_capital': 200,
            'risk_percentage': 5,
            'entry_price': 2450,
            'stop_loss_price': 2185,
        })
        assert params.take_profit_price is None


def test_calculation_result_to_dict():
    result = CalculationResult(1.0, 2.0, 3.0, 4.0)
    assert result.to_dict() == {
        'position_size': 1.0,
        'potential_loss': 2.0,
        'potential_profit': 3.0,
        'risk_reward_ratio': 4.0,
    }
