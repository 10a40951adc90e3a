"""Tests for catalog normalizer."""

from asset_parser.core.normalizer import (
    normalize_asset,
    normalize_assets,
    normalize_sensors,
    normalize_tags,
)
from asset_parser.core.schema import (
    SensorInfo,
    assets_from_json,
    sensors_from_json,
)


def test_normalize_sensors_trims_and_sorts(sample_sensors_json):
    """Sensors should be trimmed, tag-sorted, and ordered by id."""
    result = normalize_sensors(sensors_from_json(sample_sensors_json))

    assert [s.id for s in result] == ["fan_status", "mode_name", "zone_temp"]
    zone = result[2]
    assert zone.display_name == "Zone Temperature"
    assert zone.marker_tags == ["sensor", "temp", "zone"]
    assert zone.unit == "°C"


def test_normalize_sensor_keeps_duplicate_tags():
    """Tags are sorted but not deduplicated."""
    sensors = sensors_from_json([
        {"id": " s1 ", "displayName": "Temp", "markerTags": ["zone", "  zone"],
         "type": "Numeric", "unit": "°F"},
    ])
    result = normalize_sensors(sensors)

    assert result[0].id == "s1"
    assert result[0].marker_tags == ["zone", "zone"]


def test_normalize_assets_trims_and_sorts(sample_assets_json):
    """Assets, their tags, and sensor references should all be sorted."""
    result = normalize_assets(assets_from_json(sample_assets_json))

    assert [a.id for a in result] == ["ahu", "vav"]
    vav = result[1]
    assert vav.marker_tags == ["equip", "vav"]
    assert vav.mandatory_sensors == [SensorInfo("zone_temp", ["air"])]
    assert [i.sensor_id for i in vav.optional_sensors] == ["fan_status", "mode_name"]
    assert vav.optional_sensors[0].extra_marker_tags == ["run"]
    assert vav.asset_type_id == 3


def test_normalize_asset_passes_through_optional_fields(make_asset):
    asset = make_asset(is_plant=False, asset_type_id=7)
    result = normalize_asset(asset)

    assert result.is_plant is False
    assert result.asset_type_id == 7


def test_normalize_is_idempotent(sample_sensors_json, sample_assets_json):
    sensors = normalize_sensors(sensors_from_json(sample_sensors_json))
    assets = normalize_assets(assets_from_json(sample_assets_json))

    assert normalize_sensors(sensors) == sensors
    assert normalize_assets(assets) == assets


def test_normalize_is_order_independent(sample_sensors_json, sample_assets_json):
    sensors = normalize_sensors(sensors_from_json(sample_sensors_json))
    reversed_sensors = normalize_sensors(sensors_from_json(sample_sensors_json[::-1]))
    assets = normalize_assets(assets_from_json(sample_assets_json))
    reversed_assets = normalize_assets(assets_from_json(sample_assets_json[::-1]))

    assert sensors == reversed_sensors
    assert assets == reversed_assets


def test_normalize_does_not_modify_input(sample_sensors_json):
    sensors = sensors_from_json(sample_sensors_json)
    normalize_sensors(sensors)

    assert sensors[0].id == " zone_temp "
    assert sensors[0].marker_tags == ["zone", " temp", "sensor "]


def test_normalize_tags_sorts_by_code_point():
    assert normalize_tags(["b", "B", "a_", "a"]) == ["B", "a", "a_", "b"]
