"""CLI commands for specfilter"""

import argparse
import sys
from typing import List, Optional

from ..api.exceptions import SpecFilterError
from ..api.specfilter import build_specification, list_specifications
from ..core.config import MATCH_MODES, ConfigManager
from ..core.logger_setup import setup_logging
from ..data.io.catalog import load_catalog
from ..data.models.product import Product
from ..filter.base_filter import SpecificationFilter


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI commands"""
    parser = argparse.ArgumentParser(
        prog="specfilter",
        description="specfilter - filter product catalogs with composable specifications",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file (TOML, YAML, or JSON)",
        default=None,
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Override logging.level from the configuration",
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    filter_parser = subparsers.add_parser("filter", help="Filter the products of a catalog file")
    filter_parser.add_argument("catalog", type=str, help="Path to catalog file (TOML, YAML, or JSON)")
    filter_parser.add_argument("--color", type=str, help="Keep products of this color", default=None)
    filter_parser.add_argument("--name", type=str, help="Keep products whose name contains this text", default=None)
    filter_parser.add_argument(
        "--match",
        type=str,
        choices=MATCH_MODES,
        help="Combine criteria with AND (all) or OR (any); defaults to filter.match from the config, else 'all'",
        default=None,
    )
    filter_parser.add_argument("--negate", action="store_true", help="Keep products that do NOT match")

    subparsers.add_parser("list-specs", help="List available specifications")

    return parser


def load_settings(args) -> ConfigManager:
    """Build a ConfigManager from --config (if any) and configure logging."""
    config_manager = ConfigManager(config_file_path=args.config)
    if args.config:
        config_manager.load_config()
    if args.log_level:
        config_manager.set_param("logging.level", args.log_level)
    setup_logging(config_manager)
    return config_manager


def run_filter(
    products: List[Product],
    color: Optional[str] = None,
    name: Optional[str] = None,
    match: str = "all",
    negate: bool = False,
) -> List[Product]:
    """Apply the criteria given on the command line to ``products``."""
    criteria = {}
    if color is not None:
        criteria["color"] = color
    if name is not None:
        criteria["name"] = name
    spec = build_specification(criteria, match=match, negate=negate)
    if spec is None:
        return list(products)
    return SpecificationFilter(item_type=Product).filter(products, spec)


def handle_filter_command(args, config_manager: ConfigManager) -> int:
    """Handle filter command"""
    try:
        match = args.match or config_manager.get_param("filter.match", "all")
        products = load_catalog(args.catalog)
        matched = run_filter(products, args.color, args.name, match, args.negate)
    except (FileNotFoundError, SpecFilterError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for product in matched:
        print(product.name)
    return 0


def handle_list_specs_command(args) -> int:
    """Handle list-specs command"""
    print("Available specifications:")
    for name in list_specifications():
        print(f"  - {name}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config_manager = load_settings(args)
    except (FileNotFoundError, SpecFilterError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "filter":
        return handle_filter_command(args, config_manager)
    elif args.command == "list-specs":
        return handle_list_specs_command(args)
    else:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
