"""
Asset catalog validation.

Checks each asset's own fields, then every sensor reference against the
sensor catalog, then the asset type against the asset type catalog.
Only meaningful once the sensor catalog itself has validated cleanly.
"""

import logging
from types import MappingProxyType
from typing import AbstractSet, List, Mapping, Optional

from asset_parser.core.schema import Asset, Sensor, SensorInfo
from asset_parser.reference.catalogs import load_asset_type_ids
from asset_parser.validation.common import (
    AGGREGATE_MARKER,
    ValidationFinding,
    has_duplicates,
    subject_for,
)
from asset_parser.validation.tags import is_tag_name

logger = logging.getLogger(__name__)

# Assets carrying this tag are virtual and may have no mandatory sensors
DEVELOPER_TAG = "developer"


def build_sensor_lookup(sensors: List[Sensor]) -> Mapping[str, Sensor]:
    """
    Index sensors by id.

    On duplicate ids the last sensor wins; duplicates are reported by the
    sensor validator.
    """
    return MappingProxyType({sensor.id: sensor for sensor in sensors})


def _check_sensor_info(info: SensorInfo, sensor_lookup: Mapping[str, Sensor]) -> List[str]:
    if not info.sensor_id:
        # No sensor to look up, but the extra tags can still be checked
        messages = ["Sensor info has an empty sensor id"]
        for tag in info.extra_marker_tags:
            if not is_tag_name(tag):
                messages.append(f"Invalid SkySpark marker tag '{tag}' for sensor info with an empty sensor id")
        return messages

    sensor = sensor_lookup.get(info.sensor_id)
    if sensor is None:
        return [f"No matching sensor with id '{info.sensor_id}'"]

    messages = []
    tags = set(sensor.marker_tags) | set(info.extra_marker_tags)
    if len(tags) < len(sensor.marker_tags) + len(info.extra_marker_tags):
        messages.append(f"Duplicate tags for sensor '{info.sensor_id}'")
    for tag in sorted(tags):
        if not is_tag_name(tag):
            messages.append(f"Invalid SkySpark marker tag '{tag}' for sensor '{info.sensor_id}'")
    return messages


def _check_asset(
    asset: Asset,
    sensor_lookup: Mapping[str, Sensor],
    asset_type_ids: AbstractSet[int],
) -> List[ValidationFinding]:
    messages = []

    if not asset.id:
        messages.append("Empty id")
    if not asset.marker_tags:
        messages.append("No SkySpark marker tags")
    for tag in asset.marker_tags:
        if not is_tag_name(tag):
            messages.append(f"Invalid SkySpark marker tag '{tag}'")
    if not asset.display_name:
        messages.append("Empty display name")
    if not asset.mandatory_sensors and DEVELOPER_TAG not in asset.marker_tags:
        messages.append("No mandatory sensors")

    infos = asset.mandatory_sensors + asset.optional_sensors
    for info in infos:
        messages.extend(_check_sensor_info(info, sensor_lookup))
    if has_duplicates(info.sensor_id for info in infos):
        messages.append("Duplicate sensor ids")

    if asset.asset_type_id is not None and asset.asset_type_id not in asset_type_ids:
        messages.append(f"Invalid asset type id {asset.asset_type_id}")

    subject = subject_for(asset.id)
    return [ValidationFinding(subject, message) for message in messages]


def get_asset_errors(
    assets: List[Asset],
    sensor_lookup: Mapping[str, Sensor],
    asset_type_ids: Optional[AbstractSet[int]] = None,
) -> List[ValidationFinding]:
    """
    Validate a normalized asset catalog against a validated sensor catalog.

    Args:
        assets: Assets as returned by normalize_assets
        sensor_lookup: Sensors by id (see build_sensor_lookup)
        asset_type_ids: Valid asset type ids (default: the bundled catalog)

    Returns:
        Findings in record order followed by catalog-wide findings;
        an empty list means the catalog is valid
    """
    if asset_type_ids is None:
        asset_type_ids = load_asset_type_ids()

    findings: List[ValidationFinding] = []
    for asset in assets:
        findings.extend(_check_asset(asset, sensor_lookup, asset_type_ids))

    if has_duplicates(asset.id for asset in assets):
        findings.append(ValidationFinding(AGGREGATE_MARKER, "Asset ids are not unique"))

    logger.info(f"Validated {len(assets)} assets: {len(findings)} finding(s)")
    return findings
