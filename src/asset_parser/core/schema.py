"""
Sensor and Asset Catalog Schema

This module defines the records both catalogs are parsed into, and the
camelCase JSON form they are written back out as.

Key Design Principles:
1. One canonical external field name per concept (`markerTags`,
   `extraMarkerTags`); field order in the output is fixed
2. Absent optional fields (`unit`, `isPlant`, `assetTypeId`) are omitted
   from the output rather than written as null
3. Ingestion is strict about shape: a record that cannot be read is an
   input fault (InputFileError), not a validation finding
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from asset_parser.core.errors import InputFileError


# ============================================================================
# SCHEMA DEFINITIONS
# ============================================================================

class SensorType(str, Enum):
    """Value type of a sensor point."""
    BOOL = "Bool"
    NUMERIC = "Numeric"
    STRING = "String"


@dataclass
class Sensor:
    """
    A single measurable or observable point.

    `unit` is only meaningful for Numeric sensors.
    """
    id: str
    display_name: str
    marker_tags: List[str]
    type: SensorType
    unit: Optional[str] = None


@dataclass
class SensorInfo:
    """Link from an asset to a sensor, with asset-specific extra tags."""
    sensor_id: str
    extra_marker_tags: List[str] = field(default_factory=list)


@dataclass
class Asset:
    """
    A piece of equipment built from sensor references.

    `is_plant` is passed through untouched.
    """
    id: str
    display_name: str
    marker_tags: List[str]
    mandatory_sensors: List[SensorInfo] = field(default_factory=list)
    optional_sensors: List[SensorInfo] = field(default_factory=list)
    is_plant: Optional[bool] = None
    asset_type_id: Optional[int] = None


# ============================================================================
# PARSING HELPERS
# ============================================================================

def _where(kind: str, index: int, record: Dict[str, Any]) -> str:
    record_id = record.get("id") if isinstance(record, dict) else None
    if isinstance(record_id, str):
        return f"{kind} #{index} (id '{record_id}')"
    return f"{kind} #{index}"


def _require(record: Dict[str, Any], key: str, where: str) -> Any:
    if key not in record:
        raise InputFileError(f"{where} is missing required field '{key}'")
    return record[key]


def _expect_str(value: Any, key: str, where: str) -> str:
    if not isinstance(value, str):
        raise InputFileError(f"{where} field '{key}' must be a string")
    return value


def _expect_str_list(value: Any, key: str, where: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InputFileError(f"{where} field '{key}' must be a list of strings")
    return list(value)


def _expect_list(value: Any, key: str, where: str) -> List[Any]:
    if not isinstance(value, list):
        raise InputFileError(f"{where} field '{key}' must be a list")
    return value


def sensor_from_dict(data: Dict[str, Any], index: int = 0) -> Sensor:
    """
    Build a Sensor from its JSON object.

    Raises:
        InputFileError: If a required field is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise InputFileError(f"Sensor #{index} must be a JSON object")
    where = _where("Sensor", index, data)

    raw_type = _expect_str(_require(data, "type", where), "type", where)
    try:
        sensor_type = SensorType(raw_type)
    except ValueError:
        allowed = ", ".join(t.value for t in SensorType)
        raise InputFileError(f"{where} has unknown type '{raw_type}' (expected one of: {allowed})") from None

    unit = data.get("unit")
    if unit is not None:
        unit = _expect_str(unit, "unit", where)

    return Sensor(
        id=_expect_str(_require(data, "id", where), "id", where),
        display_name=_expect_str(_require(data, "displayName", where), "displayName", where),
        marker_tags=_expect_str_list(_require(data, "markerTags", where), "markerTags", where),
        type=sensor_type,
        unit=unit,
    )


def sensor_info_from_dict(data: Dict[str, Any], where: str) -> SensorInfo:
    """Build a SensorInfo from its JSON object."""
    if not isinstance(data, dict):
        raise InputFileError(f"{where} has a sensor reference that is not a JSON object")
    return SensorInfo(
        sensor_id=_expect_str(_require(data, "sensorId", where), "sensorId", where),
        extra_marker_tags=_expect_str_list(
            data.get("extraMarkerTags", []), "extraMarkerTags", where
        ),
    )


def asset_from_dict(data: Dict[str, Any], index: int = 0) -> Asset:
    """
    Build an Asset from its JSON object.

    Raises:
        InputFileError: If a required field is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise InputFileError(f"Asset #{index} must be a JSON object")
    where = _where("Asset", index, data)

    is_plant = data.get("isPlant")
    if is_plant is not None and not isinstance(is_plant, bool):
        raise InputFileError(f"{where} field 'isPlant' must be a boolean")

    asset_type_id = data.get("assetTypeId")
    if asset_type_id is not None:
        # bool is an int subclass in Python
        if isinstance(asset_type_id, bool) or not isinstance(asset_type_id, int) or asset_type_id < 0:
            raise InputFileError(f"{where} field 'assetTypeId' must be a non-negative integer")

    mandatory = _expect_list(data.get("mandatorySensors", []), "mandatorySensors", where)
    optional = _expect_list(data.get("optionalSensors", []), "optionalSensors", where)

    return Asset(
        id=_expect_str(_require(data, "id", where), "id", where),
        display_name=_expect_str(_require(data, "displayName", where), "displayName", where),
        marker_tags=_expect_str_list(_require(data, "markerTags", where), "markerTags", where),
        mandatory_sensors=[sensor_info_from_dict(info, where) for info in mandatory],
        optional_sensors=[sensor_info_from_dict(info, where) for info in optional],
        is_plant=is_plant,
        asset_type_id=asset_type_id,
    )


def sensors_from_json(data: Any) -> List[Sensor]:
    """Parse the top-level sensors document (a JSON array)."""
    if not isinstance(data, list):
        raise InputFileError("Sensors file must contain a JSON array")
    return [sensor_from_dict(item, index) for index, item in enumerate(data)]


def assets_from_json(data: Any) -> List[Asset]:
    """Parse the top-level assets document (a JSON array)."""
    if not isinstance(data, list):
        raise InputFileError("Assets file must contain a JSON array")
    return [asset_from_dict(item, index) for index, item in enumerate(data)]


# ============================================================================
# SERIALIZATION
# ============================================================================

def sensor_to_dict(sensor: Sensor) -> Dict[str, Any]:
    """Convert a Sensor to its camelCase JSON object."""
    result: Dict[str, Any] = {
        "id": sensor.id,
        "displayName": sensor.display_name,
        "markerTags": list(sensor.marker_tags),
        "type": sensor.type.value,
    }
    if sensor.unit is not None:
        result["unit"] = sensor.unit
    return result


def sensor_info_to_dict(info: SensorInfo) -> Dict[str, Any]:
    return {
        "sensorId": info.sensor_id,
        "extraMarkerTags": list(info.extra_marker_tags),
    }


def asset_to_dict(asset: Asset) -> Dict[str, Any]:
    """Convert an Asset to its camelCase JSON object."""
    result: Dict[str, Any] = {"id": asset.id}
    if asset.is_plant is not None:
        result["isPlant"] = asset.is_plant
    result["displayName"] = asset.display_name
    result["markerTags"] = list(asset.marker_tags)
    result["mandatorySensors"] = [sensor_info_to_dict(i) for i in asset.mandatory_sensors]
    result["optionalSensors"] = [sensor_info_to_dict(i) for i in asset.optional_sensors]
    if asset.asset_type_id is not None:
        result["assetTypeId"] = asset.asset_type_id
    return result


def to_json_dict(obj: Any) -> Any:
    """Convert a Sensor, Asset, or a list of them to JSON-ready values."""
    if isinstance(obj, list):
        return [to_json_dict(item) for item in obj]
    if isinstance(obj, Sensor):
        return sensor_to_dict(obj)
    if isinstance(obj, Asset):
        return asset_to_dict(obj)
    if isinstance(obj, SensorInfo):
        return sensor_info_to_dict(obj)
    raise TypeError(f"Cannot serialize {type(obj).__name__}")
