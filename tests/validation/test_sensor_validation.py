"""Tests for sensor catalog validation."""

from asset_parser.core.normalizer import normalize_sensors
from asset_parser.core.schema import SensorType, sensors_from_json
from asset_parser.validation.common import AGGREGATE_MARKER, EMPTY_ID_MARKER, ValidationFinding
from asset_parser.validation.sensors import get_sensor_errors


def messages(findings):
    return [f.message for f in findings]


def test_valid_sensors_have_no_findings(sample_sensors_json, units):
    sensors = normalize_sensors(sensors_from_json(sample_sensors_json))
    assert get_sensor_errors(sensors, units) == []


def test_empty_fields(make_sensor, units):
    sensor = make_sensor(id="", display_name="", marker_tags=[])
    findings = get_sensor_errors([sensor], units)

    assert findings == [
        ValidationFinding(EMPTY_ID_MARKER, "Empty id"),
        ValidationFinding(EMPTY_ID_MARKER, "Empty display name"),
        ValidationFinding(EMPTY_ID_MARKER, "No SkySpark marker tags"),
    ]


def test_one_finding_per_invalid_tag(make_sensor, units):
    sensor = make_sensor(marker_tags=["Bad", "good", "also bad"])
    findings = get_sensor_errors([sensor], units)

    assert messages(findings) == [
        "Invalid SkySpark marker tag 'Bad'",
        "Invalid SkySpark marker tag 'also bad'",
    ]
    assert all(f.subject_id == "s1" for f in findings)


def test_numeric_sensor_unit_must_be_known(make_sensor, units):
    good = make_sensor(id="good", type=SensorType.NUMERIC, unit="kW")
    bad = make_sensor(id="bad", type=SensorType.NUMERIC, unit="furlongs")

    assert get_sensor_errors([good, bad], units) == [
        ValidationFinding("bad", "Invalid unit 'furlongs'"),
    ]


def test_numeric_sensor_without_unit_is_valid(make_sensor, units):
    sensor = make_sensor(type=SensorType.NUMERIC, unit=None)
    assert get_sensor_errors([sensor], units) == []


def test_non_numeric_sensor_with_unit(make_sensor, units):
    for sensor_type in (SensorType.BOOL, SensorType.STRING):
        sensor = make_sensor(type=sensor_type, unit="kW")
        assert messages(get_sensor_errors([sensor], units)) == ["Has a unit but is not numeric"]


def test_duplicate_ids_reported_once(make_sensor, units):
    sensors = [make_sensor(), make_sensor(), make_sensor(), make_sensor(id="s2")]
    findings = get_sensor_errors(sensors, units)

    assert findings == [ValidationFinding(AGGREGATE_MARKER, "Sensor ids are not unique")]


def test_findings_accumulate_across_sensors(make_sensor, units):
    sensors = [
        make_sensor(id="a", display_name=""),
        make_sensor(id="b", marker_tags=[]),
        make_sensor(id="a", type=SensorType.STRING, unit="%"),
    ]
    findings = get_sensor_errors(sensors, units)

    assert [(f.subject_id, f.message) for f in findings] == [
        ("a", "Empty display name"),
        ("b", "No SkySpark marker tags"),
        ("a", "Has a unit but is not numeric"),
        (AGGREGATE_MARKER, "Sensor ids are not unique"),
    ]


def test_duplicate_tags_within_a_sensor_are_not_flagged(units):
    """
    A sensor's own tag list may contain repeats: normalization sorts but
    does not deduplicate, and the sensor rules do not look for repeats.
    Whether repeats should be rejected here is an open question; this pins
    the current behavior. They do surface later as "Duplicate tags" when an
    asset references the sensor.
    """
    sensors = normalize_sensors(sensors_from_json([
        {"id": " s1 ", "displayName": "Temp", "markerTags": ["zone", "  zone"],
         "type": "Numeric", "unit": "°F"},
    ]))

    assert sensors[0].marker_tags == ["zone", "zone"]
    assert get_sensor_errors(sensors, units) == []
    assert messages(get_sensor_errors(sensors, frozenset())) == ["Invalid unit '°F'"]


def test_bundled_unit_catalog_is_used_by_default(make_sensor):
    sensor = make_sensor(type=SensorType.NUMERIC, unit="°F")
    assert get_sensor_errors([sensor]) == []
