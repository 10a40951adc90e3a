"""Validation rules for sensor and asset catalogs."""

from asset_parser.validation.assets import build_sensor_lookup, get_asset_errors
from asset_parser.validation.common import (
    AGGREGATE_MARKER,
    EMPTY_ID_MARKER,
    ValidationFinding,
    has_duplicates,
)
from asset_parser.validation.sensors import get_sensor_errors
from asset_parser.validation.tags import is_tag_name

__all__ = [
    "build_sensor_lookup",
    "get_asset_errors",
    "get_sensor_errors",
    "is_tag_name",
    "has_duplicates",
    "ValidationFinding",
    "AGGREGATE_MARKER",
    "EMPTY_ID_MARKER",
]
