"""
Module de logging du calculateur
"""

import json
import logging
import sys

# Configuration du logger
logger = logging.getLogger('RiskCalc')
logger.setLevel(logging.INFO)


class ColoredFormatter(logging.Formatter):
    """Formatter qui ajoute des couleurs aux logs"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Vert
        'WARNING': '\033[33m',  # Jaune
        'ERROR': '\033[31m',    # Rouge
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        message = super().format(record)
        log_color = self.COLORS.get(record.levelname, self.RESET)
        return message.replace(record.levelname, f"{log_color}{record.levelname}{self.RESET}", 1)


# S'assurer que le logger n'a pas de handlers dupliqués
if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(console_handler)


def set_log_level(level: str):
    """Change le niveau du logger ('DEBUG', 'INFO', ...)"""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Niveau de log invalide: {level}")
    logger.setLevel(numeric_level)


def _with_context(message: str, kwargs: dict) -> str:
    if kwargs:
        message = f"{message} | {json.dumps(kwargs, default=str)}"
    return message


def log_info(message: str, **kwargs):
    """Log un message de niveau INFO"""
    logger.info(_with_context(message, kwargs))


def log_error(message: str, **kwargs):
    """Log un message de niveau ERROR"""
    logger.error(_with_context(message, kwargs))


def log_debug(message: str, **kwargs):
    """Log un message de niveau DEBUG"""
    logger.debug(_with_context(message, kwargs))


def log_warning(message: str, **kwargs):
    """Log un message de niveau WARNING"""
    logger.warning(_with_context(message, kwargs))


def log_calculation(params, result):
    """
    Log le résultat d'un calcul de position

    Args:
        params: TradeParameters utilisés
        result: CalculationResult obtenu
    """
    side = params.direction.name
    message = (
        f"📊 POSITION {side}: {result.position_size:.2f} @ {params.entry_price} "
        f"| SL: {params.stop_loss_price} | Risque: {result.potential_loss:.2f}"
    )
    if params.has_take_profit:
        message += f" | TP: {params.take_profit_price} | Gain: +{result.potential_profit:.2f} | R:R {result.risk_reward_ratio:.2f}"
    logger.info(message)
