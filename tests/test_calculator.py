"""
Tests de la session de calcul
"""

import logging

import pytest

from riskcalc.core.calculator import PositionCalculator
from riskcalc.core.models import FIELD_ALIASES
from riskcalc.core.scenarios import RATIO_THRESHOLDS


@pytest.fixture
def calculator():
    calc = PositionCalculator({'default_total_capital': 200, 'default_risk_percentage': 5})
    calc.update_trade_parameters({
        'entryPrice': 2450,
        'stopLossPrice': 2185,
        'takeProfitPrice': None,
    })
    return calc


class TestPositionCalculator:

    def test_initial_state(self):
        calc = PositionCalculator()
        assert calc.trade_parameters.risk_percentage == 1
        assert calc.trade_parameters.take_profit_price is None
        assert calc.calculation_result is None
        assert calc.error is None
        assert calc.scenarios() == []

    def test_successful_calculation(self, calculator):
        result = calculator.calculate()
        assert result.position_size == pytest.approx(92.45, abs=0.01)
        assert calculator.calculation_result is result
        assert calculator.error is None

    def test_snake_case_names(self, calculator):
        calculator.update_trade_parameter('take_profit_price', 3245)
        assert calculator.calculate().risk_reward_ratio == pytest.approx(3)

    def test_unknown_parameter(self, calculator):
        with pytest.raises(KeyError):
            calculator.update_trade_parameter('leverage', 10)

    def test_error_is_stored_not_raised(self, calculator, caplog):
        calculator.calculate()
        calculator.update_trade_parameter('stopLossPrice', 2450)

        with caplog.at_level(logging.WARNING, logger='RiskCalc'):
            assert calculator.calculate() is None

        assert calculator.error == "Entry price and stop loss price cannot be equal."
        assert calculator.calculation_result is None
        assert calculator.scenarios() == []
        assert "cannot be equal" in caplog.text

    def test_error_cleared_after_success(self, calculator):
        calculator.update_trade_parameter('stopLossPrice', 2450)
        calculator.calculate()
        calculator.update_trade_parameter('stopLossPrice', 2185)
        calculator.calculate()
        assert calculator.error is None

    def test_overrides_do_not_change_defaults(self, calculator):
        result = calculator.calculate(total_capital=10000, risk_percentage=1)
        assert result.potential_loss == pytest.approx(100)
        assert calculator.trade_parameters.total_capital == 200
        assert calculator.trade_parameters.risk_percentage == 5
        assert calculator.last_parameters.total_capital == 10000

    def test_scenarios_use_configured_ratios(self):
        calc = PositionCalculator({
            'default_total_capital': 10000,
            'scenario_ratios': [2, 4],
            'ratio_thresholds': {'good': 3.0, 'decent': 1.0},
        })
        calc.update_trade_parameters({'entryPrice': 100, 'stopLossPrice': 90})
        calc.calculate()

        scenarios = calc.scenarios()
        assert [s.label for s in scenarios] == ["1:2", "1:4"]
        assert [s.quality.value for s in scenarios] == ["acceptable", "excellent"]

    def test_thresholds_are_copied_per_instance(self):
        calc = PositionCalculator()
        calc.ratio_thresholds['good'] = 10.0
        assert RATIO_THRESHOLDS['good'] == 2.0
        assert PositionCalculator().ratio_thresholds['good'] == 2.0

    @pytest.mark.parametrize("name", list(FIELD_ALIASES))
    def test_accepts_every_form_field_name(self, calculator, name):
        calculator.update_trade_parameter(name, 1)
        assert getattr(calculator.trade_parameters, FIELD_ALIASES[name]) == 1
