"""
Catalog Normalizer

Puts sensor and asset catalogs into canonical form: whitespace trimmed,
tags sorted, sensor references sorted by sensor id, records sorted by id.
The result is independent of input ordering, so the written catalogs diff
cleanly under version control.

Usage:
    from asset_parser.core.normalizer import normalize_assets, normalize_sensors

    sensors = normalize_sensors(raw_sensors)
    assets = normalize_assets(raw_assets)

Inputs are never modified; new records are returned.
"""

import logging
from typing import List, Optional

from asset_parser.core.schema import Asset, Sensor, SensorInfo

logger = logging.getLogger(__name__)


def _trim_optional(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


def normalize_tags(tags: List[str]) -> List[str]:
    """
    Trim every tag and sort the result.

    Duplicates are kept; a tag list with repeats stays that way.
    """
    return sorted(tag.strip() for tag in tags)


# ============================================================================
# SENSORS
# ============================================================================

def normalize_sensor(sensor: Sensor) -> Sensor:
    """Return a trimmed copy of a single sensor with sorted tags."""
    return Sensor(
        id=sensor.id.strip(),
        display_name=sensor.display_name.strip(),
        marker_tags=normalize_tags(sensor.marker_tags),
        type=sensor.type,
        unit=_trim_optional(sensor.unit),
    )


def normalize_sensors(sensors: List[Sensor]) -> List[Sensor]:
    """Normalize every sensor and sort the catalog by id."""
    normalized = sorted((normalize_sensor(s) for s in sensors), key=lambda s: s.id)
    logger.debug(f"Normalized {len(normalized)} sensors")
    return normalized


# ============================================================================
# ASSETS
# ============================================================================

def normalize_sensor_info(info: SensorInfo) -> SensorInfo:
    """Return a trimmed copy of a sensor reference with sorted extra tags."""
    return SensorInfo(
        sensor_id=info.sensor_id.strip(),
        extra_marker_tags=normalize_tags(info.extra_marker_tags),
    )


def _normalize_sensor_infos(infos: List[SensorInfo]) -> List[SensorInfo]:
    return sorted((normalize_sensor_info(i) for i in infos), key=lambda i: i.sensor_id)


def normalize_asset(asset: Asset) -> Asset:
    """Return a trimmed copy of a single asset with sorted tags and sensors."""
    return Asset(
        id=asset.id.strip(),
        display_name=asset.display_name.strip(),
        marker_tags=normalize_tags(asset.marker_tags),
        mandatory_sensors=_normalize_sensor_infos(asset.mandatory_sensors),
        optional_sensors=_normalize_sensor_infos(asset.optional_sensors),
        is_plant=asset.is_plant,
        asset_type_id=asset.asset_type_id,
    )


def normalize_assets(assets: List[Asset]) -> List[Asset]:
    """Normalize every asset and sort the catalog by id."""
    normalized = sorted((normalize_asset(a) for a in assets), key=lambda a: a.id)
    logger.debug(f"Normalized {len(normalized)} assets")
    return normalized
