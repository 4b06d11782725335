from datetime import date

import pytest

from delivery_zones.eligibility import explain_delivery, get_delivery_info
from delivery_zones.models import InvalidPointError, Point, SkipReason, TimeWindow

from conftest import FAR_AWAY, INSIDE_LA, make_zone


def test_point_inside_zone_on_monday(zone_a):
    info = get_delivery_info(Point(*INSIDE_LA), [zone_a], weekday="monday")
    assert info.is_eligible
    assert info.primary_zone.id == "A"
    assert info.zones == [zone_a]
    assert info.merged_windows == {
        "monday": [TimeWindow("11:00", "13:00"), TimeWindow("13:00", "15:00")]
    }


def test_delivery_date_resolves_weekday(zone_a):
    info = get_delivery_info(Point(*INSIDE_LA), [zone_a], weekday=date(2024, 1, 1))
    assert list(info.merged_windows) == ["monday"]
    info = get_delivery_info(Point(*INSIDE_LA), [zone_a], weekday="2024-01-01")
    assert list(info.merged_windows) == ["monday"]


def test_inactive_zone_is_not_eligible(la_feature):
    zone = make_zone("A", la_feature, {"monday": [{"start": "11:00", "end": "13:00"}]}, active=False)
    info = get_delivery_info(Point(*INSIDE_LA), [zone], weekday="monday")
    assert not info.is_eligible
    assert info.zones == []
    assert info.primary_zone is None


def test_point_outside_all_zones(zone_a):
    info = get_delivery_info(Point(*FAR_AWAY), [zone_a], weekday="monday")
    assert not info.is_eligible
    assert info.merged_windows == {"monday": []}


def test_two_zones_union_tuesday_windows(la_feature):
    a = make_zone("A", la_feature, {"tuesday": [{"start": "09:00", "end": "11:00"}]})
    b = make_zone("B", la_feature, {"tuesday": [{"start": "10:00", "end": "12:00"}]})
    info = get_delivery_info(Point(*INSIDE_LA), [a, b], weekday="tuesday")
    assert info.merged_windows["tuesday"] == [TimeWindow("09:00", "11:00"), TimeWindow("10:00", "12:00")]
    assert info.primary_zone.id == "A"


def test_eligible_without_windows_that_day(zone_a):
    info = get_delivery_info(Point(*INSIDE_LA), [zone_a], weekday="sunday")
    assert info.is_eligible
    assert info.merged_windows == {"sunday": []}


def test_malformed_geometry_never_raises():
    zone = make_zone("X", {"type": "Polygon", "coordinates": None})
    for point in [INSIDE_LA, FAR_AWAY, (0, 0)]:
        assert not get_delivery_info(Point(*point), [zone], weekday="monday").is_eligible


def test_weekly_view_when_no_weekday(la_feature):
    zone = make_zone("A", la_feature, {
        "monday": [{"start": "11:00", "end": "13:00"}],
        "friday": [{"start": "17:00", "end": "19:00"}],
    })
    info = get_delivery_info(Point(*INSIDE_LA), [zone])
    assert sorted(info.merged_windows) == ["friday", "monday"]


def test_accepts_raw_records_and_point_shapes(la_feature):
    record = {"id": 7, "name": "LA", "geojson": la_feature, "windows": {}, "active": True}
    for point in [
        INSIDE_LA,
        {"lat": INSIDE_LA[1], "lon": INSIDE_LA[0]},
        {"type": "Point", "coordinates": list(INSIDE_LA)},
    ]:
        info = get_delivery_info(point, [record], weekday="monday")
        assert info.primary_zone.id == "7"


@pytest.mark.parametrize("point", [
    {"lat": "34.07", "lon": -118.3},
    {"lat": None, "lon": -118.3},
    {"lon": -118.3},
    (float("nan"), 34.0),
    (True, 34.0),
    "34.07,-118.3",
])
def test_invalid_point_raises(point, zone_a):
    with pytest.raises(InvalidPointError):
        get_delivery_info(point, [zone_a])


def test_deterministic(zone_a, la_feature):
    zones = [zone_a, make_zone("B", la_feature, {"monday": [{"start": "08:00", "end": "09:00"}]})]
    first = get_delivery_info(Point(*INSIDE_LA), zones, weekday="monday")
    second = get_delivery_info(Point(*INSIDE_LA), zones, weekday="monday")
    assert first == second


def test_to_dict_shape(zone_a):
    payload = get_delivery_info(Point(*INSIDE_LA), [zone_a], weekday="monday").to_dict()
    assert payload["isEligible"] is True
    assert payload["primaryZone"]["id"] == "A"
    assert payload["mergedWindows"]["monday"][0] == {"start": "11:00", "end": "13:00"}
    assert [z["id"] for z in payload["zones"]] == ["A"]


def test_explain_delivery_reasons(zone_a, la_feature):
    zones = [make_zone("off", la_feature, active=False), zone_a]
    reasons = [m.reason for m in explain_delivery(INSIDE_LA, zones)]
    assert reasons == [SkipReason.INACTIVE, None]


@pytest.mark.parametrize("windows", [
    {"monday": [{"start": "11:00"}, {"start": "13:00", "end": "15:00"}]},
    {"monday": [{"start": "13:00", "end": "15:00"}, "11:00-13:00", None]},
    {"monday": "11:00-13:00", "tuesday": [{"start": "13:00", "end": "15:00"}]},
    ["monday"],
])
def test_malformed_window_records_never_raise(la_feature, windows):
    record = {"id": "A", "name": "LA", "geojson": la_feature, "windows": windows, "active": True}
    info = get_delivery_info(INSIDE_LA, [record], weekday="monday")
    assert info.is_eligible
    assert info.primary_zone.id == "A"


def test_window_missing_end_passes_through(la_feature):
    record = {
        "id": "A",
        "name": "LA",
        "geojson": la_feature,
        "windows": {"monday": [{"start": "11:00"}, {"start": "13:00", "end": "15:00"}]},
        "active": True,
    }
    info = get_delivery_info(INSIDE_LA, [record], weekday="monday")
    assert info.merged_windows["monday"] == [TimeWindow("11:00", None), TimeWindow("13:00", "15:00")]
