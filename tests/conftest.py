"""Shared test fixtures for asset_parser tests."""

import json

import pytest

from asset_parser.core.schema import Asset, Sensor, SensorInfo, SensorType


@pytest.fixture
def sample_sensors_json():
    """Raw sensors file content, deliberately unsorted and untrimmed."""
    return [
        {
            "id": " zone_temp ",
            "displayName": " Zone Temperature ",
            "markerTags": ["zone", " temp", "sensor "],
            "type": "Numeric",
            "unit": " °C ",
        },
        {
            "id": "fan_status",
            "displayName": "Fan Status",
            "markerTags": ["fan", "cmd"],
            "type": "Bool",
        },
        {
            "id": "mode_name",
            "displayName": "Mode Name",
            "markerTags": ["mode"],
            "type": "String",
        },
    ]


@pytest.fixture
def sample_assets_json():
    """Raw assets file content referencing the sample sensors."""
    return [
        {
            "id": "vav",
            "displayName": "VAV Box",
            "markerTags": ["vav", "equip"],
            "mandatorySensors": [
                {"sensorId": " zone_temp", "extraMarkerTags": ["air"]},
            ],
            "optionalSensors": [
                {"sensorId": "mode_name", "extraMarkerTags": []},
                {"sensorId": "fan_status", "extraMarkerTags": [" run"]},
            ],
            "assetTypeId": 3,
        },
        {
            "id": "ahu",
            "isPlant": True,
            "displayName": "Air Handling Unit",
            "markerTags": ["ahu", "equip"],
            "mandatorySensors": [
                {"sensorId": "fan_status", "extraMarkerTags": ["discharge"]},
            ],
            "optionalSensors": [],
        },
    ]


@pytest.fixture
def units():
    """Small substitute unit catalog."""
    return frozenset({"°C", "°F", "kW", "%"})


@pytest.fixture
def asset_type_ids():
    """Small substitute asset type catalog."""
    return frozenset({1, 2, 3})


@pytest.fixture
def make_sensor():
    """Factory for a valid normalized sensor with overridable fields."""
    def _make(**overrides):
        fields = {
            "id": "s1",
            "display_name": "Sensor 1",
            "marker_tags": ["sensor"],
            "type": SensorType.BOOL,
            "unit": None,
        }
        fields.update(overrides)
        return Sensor(**fields)
    return _make


@pytest.fixture
def make_asset():
    """Factory for a valid normalized asset with overridable fields."""
    def _make(**overrides):
        fields = {
            "id": "a1",
            "display_name": "Asset 1",
            "marker_tags": ["equip"],
            "mandatory_sensors": [SensorInfo("s1", [])],
            "optional_sensors": [],
            "asset_type_id": None,
        }
        fields.update(overrides)
        return Asset(**fields)
    return _make


@pytest.fixture
def write_json(tmp_path):
    """Write a value as JSON under tmp_path and return the path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
