"""
asset_parser - SkySpark Sensor and Asset Catalog Validator

Normalizes sensor and asset catalog JSON into a canonical, diff-stable
form and cross-checks tagging and referential integrity between them.
"""

__version__ = "1.0.0"

from asset_parser.pipelines.orchestrator import Orchestrator, PipelineResult
from asset_parser.core.config import validate_config, get_config_summary
from asset_parser.core.schema import Asset, Sensor, SensorInfo, SensorType
from asset_parser.core.normalizer import normalize_assets, normalize_sensors
from asset_parser.validation import get_asset_errors, get_sensor_errors, is_tag_name

__all__ = [
    "Orchestrator",
    "PipelineResult",
    "validate_config",
    "get_config_summary",
    "Asset",
    "Sensor",
    "SensorInfo",
    "SensorType",
    "normalize_assets",
    "normalize_sensors",
    "get_asset_errors",
    "get_sensor_errors",
    "is_tag_name",
]
