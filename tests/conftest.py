"""
Configuration pytest commune
"""

import sys
from pathlib import Path

import pytest

# Ajouter src/ au PYTHONPATH pour lancer les tests sans installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from riskcalc.core.models import TradeParameters


@pytest.fixture
def long_params():
    """Position longue: stop sous l'entrée"""
    return TradeParameters(
        total_capital=200,
        risk_percentage=5,
        entry_price=2450,
        stop_loss_price=2185
    )


@pytest.fixture
def short_params():
    """Position courte: stop au-dessus de l'entrée"""
    return TradeParameters(
        total_capital=200,
        risk_percentage=5,
        entry_price=2450,
        stop_loss_price=2550
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isole les tests des variables RISKCALC_* de la machine"""
    for name in ('RISKCALC_TOTAL_CAPITAL', 'RISKCALC_RISK_PERCENTAGE', 'RISKCALC_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
