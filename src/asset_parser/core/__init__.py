"""Core infrastructure: configuration, schema, normalization, file access."""

from asset_parser.core.config import (
    validate_config,
    get_config_summary,
    OUTPUT_DIR,
    ASSETS_OUTPUT_FILENAME,
    SENSORS_OUTPUT_FILENAME,
)
from asset_parser.core.errors import (
    AssetParserError,
    InputFileError,
    OutputFileError,
    ReferenceDataError,
)
from asset_parser.core.schema import (
    Asset,
    Sensor,
    SensorInfo,
    SensorType,
)
from asset_parser.core.normalizer import normalize_assets, normalize_sensors

__all__ = [
    "validate_config",
    "get_config_summary",
    "OUTPUT_DIR",
    "ASSETS_OUTPUT_FILENAME",
    "SENSORS_OUTPUT_FILENAME",
    "AssetParserError",
    "InputFileError",
    "OutputFileError",
    "ReferenceDataError",
    "Asset",
    "Sensor",
    "SensorInfo",
    "SensorType",
    "normalize_assets",
    "normalize_sensors",
]
