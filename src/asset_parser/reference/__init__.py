"""Bundled reference tables (units, asset types)."""

from asset_parser.reference.catalogs import (
    load_asset_type_ids,
    load_units,
    parse_asset_type_ids,
    parse_units,
)

__all__ = [
    "load_asset_type_ids",
    "load_units",
    "parse_asset_type_ids",
    "parse_units",
]
