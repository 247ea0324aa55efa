"""
Erreurs levées par le moteur de calcul

Toutes dérivent de ValueError: ce sont des erreurs de saisie, le message
est destiné à être affiché tel quel à l'utilisateur.
"""


class CalculationError(ValueError):
    """Erreur de base du calculateur"""


class InvalidParameterError(CalculationError):
    """Capital, risque ou prix hors limites"""


class EqualPricesError(CalculationError):
    """Prix d'entrée et stop loss identiques"""


class WrongDirectionError(CalculationError):
    """Take profit du mauvais côté du prix d'entrée"""


class PriceDistanceError(CalculationError):
    """Prix invalides pour un calcul de distance"""


class InvalidRatioError(CalculationError):
    """Ratio risque/rendement nul ou négatif"""
