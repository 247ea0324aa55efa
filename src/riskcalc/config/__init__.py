"""Configuration du calculateur"""

from .settings import load_config, validate_config, default_config

__all__ = ['load_config', 'validate_config', 'default_config']
