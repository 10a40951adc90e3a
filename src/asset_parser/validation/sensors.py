"""
Sensor catalog validation.

Every rule is checked for every sensor; findings accumulate and nothing
short-circuits, so one run reports every problem in the catalog.
"""

import logging
from typing import AbstractSet, List, Optional

from asset_parser.core.schema import Sensor, SensorType
from asset_parser.reference.catalogs import load_units
from asset_parser.validation.common import (
    AGGREGATE_MARKER,
    ValidationFinding,
    has_duplicates,
    subject_for,
)
from asset_parser.validation.tags import is_tag_name

logger = logging.getLogger(__name__)


def _check_sensor(sensor: Sensor, units: AbstractSet[str]) -> List[ValidationFinding]:
    subject = subject_for(sensor.id)
    messages = []

    if not sensor.id:
        messages.append("Empty id")
    if not sensor.display_name:
        messages.append("Empty display name")
    if not sensor.marker_tags:
        messages.append("No SkySpark marker tags")
    for tag in sensor.marker_tags:
        if not is_tag_name(tag):
            messages.append(f"Invalid SkySpark marker tag '{tag}'")

    if sensor.type == SensorType.NUMERIC:
        # A numeric sensor without a unit is allowed, just uncommon
        if sensor.unit is not None and sensor.unit not in units:
            messages.append(f"Invalid unit '{sensor.unit}'")
    elif sensor.unit is not None:
        messages.append("Has a unit but is not numeric")

    return [ValidationFinding(subject, message) for message in messages]


def get_sensor_errors(
    sensors: List[Sensor],
    units: Optional[AbstractSet[str]] = None,
) -> List[ValidationFinding]:
    """
    Validate a normalized sensor catalog.

    Args:
        sensors: Sensors as returned by normalize_sensors
        units: Valid unit symbols (default: the bundled unit catalog)

    Returns:
        Findings in record order followed by catalog-wide findings;
        an empty list means the catalog is valid
    """
    if units is None:
        units = load_units()

    findings: List[ValidationFinding] = []
    for sensor in sensors:
        findings.extend(_check_sensor(sensor, units))

    if has_duplicates(sensor.id for sensor in sensors):
        findings.append(ValidationFinding(AGGREGATE_MARKER, "Sensor ids are not unique"))

    logger.info(f"Validated {len(sensors)} sensors: {len(findings)} finding(s)")
    return findings
