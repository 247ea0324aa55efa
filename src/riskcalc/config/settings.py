"""
Module de configuration pour le calculateur de position
"""

import copy
import json
import os
from typing import Dict, Any, Optional

from dotenv import load_dotenv

# Charger les variables d'environnement
load_dotenv()

# Configuration par défaut
default_config = {
    "calculator": {
        "default_total_capital": 0,
        "default_risk_percentage": 1,
        "scenario_ratios": [1, 2, 3]
    },
    "ratio_thresholds": {
        "good": 2.0,
        "decent": 1.0
    },
    "logging": {
        "level": "INFO"
    }
}

# Variables d'environnement -> (section, clé, conversion)
ENV_OVERRIDES = {
    'RISKCALC_TOTAL_CAPITAL': ('calculator', 'default_total_capital', float),
    'RISKCALC_RISK_PERCENTAGE': ('calculator', 'default_risk_percentage', float),
    'RISKCALC_LOG_LEVEL': ('logging', 'level', str),
}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Charge la configuration depuis un fichier JSON

    Les sections du fichier complètent la configuration par défaut, puis
    les variables RISKCALC_* de l'environnement sont appliquées.

    Args:
        config_path: Chemin vers le fichier de configuration (optionnel)

    Returns:
        Dictionnaire de configuration
    """
    config = copy.deepcopy(default_config)

    if config_path is not None:
        try:
            with open(config_path, 'r') as f:
                file_config = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Fichier de configuration non trouvé: {config_path}")
        except json.JSONDecodeError:
            raise ValueError(f"Erreur lors de la lecture du fichier JSON: {config_path}")

        for section, values in file_config.items():
            if isinstance(values, dict):
                config.setdefault(section, {}).update(values)
            else:
                config[section] = values

    for env_name, (section, key, convert) in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw:
            try:
                config[section][key] = convert(raw)
            except ValueError:
                raise ValueError(f"Valeur invalide pour {env_name}: {raw}")

    return config


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Valide la configuration

    Args:
        config: Dictionnaire de configuration

    Returns:
        True si la configuration est valide
    """
    required_keys = {
        'calculator': ['default_risk_percentage', 'scenario_ratios'],
        'ratio_thresholds': ['good', 'decent'],
        'logging': ['level']
    }

    for section, keys in required_keys.items():
        if section not in config:
            raise ValueError(f"Section manquante dans la configuration: {section}")
        for key in keys:
            if key not in config[section]:
                raise ValueError(f"Clé manquante dans la configuration: {section}.{key}")

    # Valider les valeurs
    risk = config['calculator']['default_risk_percentage']
    if not 0 < risk <= 100:
        raise ValueError("Le risque par défaut doit être compris dans ]0, 100]")
    if config['calculator'].get('default_total_capital', 0) < 0:
        raise ValueError("Le capital par défaut ne peut pas être négatif")

    ratios = config['calculator']['scenario_ratios']
    if not ratios or any(r <= 0 for r in ratios):
        raise ValueError("Les ratios de scénario doivent être positifs")

    thresholds = config['ratio_thresholds']
    if not 0 < thresholds['decent'] <= thresholds['good']:
        raise ValueError("Seuils R:R invalides: il faut 0 < decent <= good")

    return True
