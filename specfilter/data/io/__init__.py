from .catalog import load_catalog, parse_products

__all__ = ["load_catalog", "parse_products"]
