import pytest

from delivery_zones.models import Zone

LA_BOX = [[
    [-118.4, 34.0],
    [-118.2, 34.0],
    [-118.2, 34.15],
    [-118.4, 34.15],
    [-118.4, 34.0],
]]

INSIDE_LA = (-118.3, 34.07)
FAR_AWAY = (-73.98, 40.75)


def make_zone(zone_id, geojson=None, windows=None, active=True, name=None):
    return Zone.from_record({
        "id": zone_id,
        "name": name or f"Zone {zone_id}",
        "geojson": geojson,
        "windows": windows or {},
        "active": active,
    })


@pytest.fixture
def la_polygon():
    return {"type": "Polygon", "coordinates": [ring[:] for ring in LA_BOX]}


@pytest.fixture
def la_feature(la_polygon):
    return {"type": "Feature", "properties": {"name": "Central LA"}, "geometry": la_polygon}


@pytest.fixture
def zone_a(la_feature):
    return make_zone("A", la_feature, {
        "monday": [{"start": "11:00", "end": "13:00"}, {"start": "13:00", "end": "15:00"}],
    })
