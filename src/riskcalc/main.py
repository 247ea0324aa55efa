#!/usr/bin/env python3
"""
Point d'entrée en ligne de commande du calculateur de position
"""

import argparse
import sys
from typing import List, Optional

from colorama import init, Fore, Style

from riskcalc.config.settings import load_config, validate_config
from riskcalc.core.calculator import PositionCalculator
from riskcalc.core.calculations import calculate_take_profit_price
from riskcalc.core.exceptions import CalculationError
from riskcalc.core.logger import log_error, set_log_level
from riskcalc.core.scenarios import classify_ratio, format_ratio, break_even_win_rate, scenarios_to_frame
from riskcalc.utils.formatters import format_to_two_decimals, format_to_eight_decimals
from riskcalc.utils.helpers import (
    is_valid_numeric_input,
    parse_form_value,
    risk_percentage_from_amount
)


def print_success(msg):
    print(f"{Fore.GREEN}✅ {msg}{Style.RESET_ALL}")


def print_error(msg):
    print(f"{Fore.RED}❌ {msg}{Style.RESET_ALL}")


def print_info(msg):
    print(f"{Fore.BLUE}ℹ️  {msg}{Style.RESET_ALL}")


def numeric_input(text: str) -> str:
    """Type argparse: nombre décimal non signé, virgule acceptée"""
    if not text.strip() or not is_valid_numeric_input(text):
        raise argparse.ArgumentTypeError(f"Nombre invalide: {text}")
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Calculateur de taille de position et de risque')
    parser.add_argument('--config', type=str, default=None, help='Chemin vers le fichier de configuration')
    parser.add_argument('--log-level', type=str, default=None, help='Niveau de log (DEBUG, INFO, ...)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    size = subparsers.add_parser('size', help='Calcule la taille de position')
    size.add_argument('--capital', type=numeric_input, default=None, help='Capital total')
    size.add_argument('--risk', type=numeric_input, default=None, help='Risque en %% du capital')
    size.add_argument('--risk-amount', type=numeric_input, default=None,
                      help='Risque en montant fixe (remplace --risk)')
    size.add_argument('--entry', type=numeric_input, required=True, help="Prix d'entrée")
    size.add_argument('--stop', type=numeric_input, required=True, help='Prix du stop loss')
    size.add_argument('--target', type=numeric_input, default=None, help='Prix du take profit (optionnel)')
    size.add_argument('--scenarios', action='store_true', help='Affiche les scénarios R:R')

    take_profit = subparsers.add_parser('take-profit', help='Calcule le take profit pour un ratio R:R')
    take_profit.add_argument('--entry', type=numeric_input, required=True, help="Prix d'entrée")
    take_profit.add_argument('--stop', type=numeric_input, required=True, help='Prix du stop loss')
    take_profit.add_argument('--ratio', type=numeric_input, required=True, help='Ratio R:R visé (2 = 1:2)')
    return parser


def run_size(args, config) -> int:
    """Calcule et affiche la position, retourne le code de sortie"""
    calculator = PositionCalculator({
        **config['calculator'],
        'ratio_thresholds': config['ratio_thresholds']
    })
    calculator.update_trade_parameters({
        'entryPrice': parse_form_value('entryPrice', args.entry),
        'stopLossPrice': parse_form_value('stopLossPrice', args.stop),
        'takeProfitPrice': parse_form_value('takeProfitPrice', args.target or ''),
    })

    capital = calculator.trade_parameters.total_capital
    if args.capital is not None:
        capital = parse_form_value('totalCapital', args.capital)

    risk = None
    if args.risk_amount is not None:
        risk = risk_percentage_from_amount(parse_form_value('riskAmount', args.risk_amount), capital)
        if risk is None:
            print_error("Le capital doit être positif pour un risque en montant fixe")
            return 1
    elif args.risk is not None:
        risk = parse_form_value('riskPercentage', args.risk)

    result = calculator.calculate(total_capital=capital, risk_percentage=risk)
    if result is None:
        print_error(calculator.error)
        return 1

    params = calculator.last_parameters
    print_success(f"Position {params.direction.name}")
    print_info(f"Taille de position : {format_to_two_decimals(result.position_size)}")
    print_info(f"Perte potentielle  : {format_to_two_decimals(result.potential_loss)}")
    print_info(f"Gain potentiel     : {format_to_two_decimals(result.potential_profit)}")

    ratio = result.risk_reward_ratio
    quality = classify_ratio(ratio, calculator.ratio_thresholds)
    print_info(f"Ratio R:R          : {format_ratio(ratio)} ({quality.value})")
    if ratio > 0:
        print_info(f"Taux de réussite d'équilibre : {format_to_two_decimals(break_even_win_rate(ratio))}%")

    if args.scenarios:
        frame = scenarios_to_frame(calculator.scenarios())
        frame['take_profit_price'] = frame['take_profit_price'].map(format_to_eight_decimals)
        for column in ('potential_profit', 'potential_loss', 'profit_percentage'):
            frame[column] = frame[column].map(format_to_two_decimals)
        print(frame.to_string())
    return 0


def run_take_profit(args) -> int:
    try:
        price = calculate_take_profit_price(
            parse_form_value('entryPrice', args.entry),
            parse_form_value('stopLossPrice', args.stop),
            parse_form_value('riskRewardRatio', args.ratio)
        )
    except CalculationError as e:
        print_error(str(e))
        return 1
    print_success(f"Take profit : {format_to_eight_decimals(price)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Fonction principale"""
    init()
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        validate_config(config)
        set_log_level(args.log_level or config['logging']['level'])
    except (FileNotFoundError, ValueError) as e:
        log_error(f"Configuration invalide: {e}")
        return 2

    if args.command == 'take-profit':
        return run_take_profit(args)
    return run_size(args, config)


if __name__ == "__main__":
    sys.exit(main())
