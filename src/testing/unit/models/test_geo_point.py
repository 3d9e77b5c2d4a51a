import pydantic
import pytest

from flatquery import DistanceUnit, GeoPoint
from flatquery.helpers import format_number, format_value, join_values


def test_geo_point_as_list():
    assert GeoPoint(lon=10, lat=20).as_list() == ["10", "20"]
    assert GeoPoint(lon=-73.5, lat=40.25).as_list() == ["-73.5", "40.25"]


def test_geo_point_is_immutable():
    point = GeoPoint(lon=1.0, lat=2.0)
    with pytest.raises(pydantic.ValidationError):
        point.lon = 3.0  # type: ignore


def test_geo_point_rejects_non_numeric_coordinates():
    with pytest.raises(pydantic.ValidationError):
        GeoPoint(lon="east", lat=0)  # type: ignore


def test_distance_conversions():
    assert GeoPoint.mi_to_radians(3956.6) == pytest.approx(1.0)
    assert GeoPoint.km_to_radians(6367.5) == pytest.approx(1.0)
    assert GeoPoint.mi_to_radians(5) == 5 / 3956.6
    assert GeoPoint.km_to_radians(5) == 5 / 6367.5

    assert GeoPoint.radians_to_mi(GeoPoint.mi_to_radians(12.0)) == pytest.approx(12.0)
    assert GeoPoint.radians_to_km(GeoPoint.km_to_radians(12.0)) == pytest.approx(12.0)


@pytest.mark.parametrize(
    "unit, radius",
    [(DistanceUnit.MILES, 3956.6), (DistanceUnit.KILOMETERS, 6367.5)],
)
def test_distance_unit(unit: DistanceUnit, radius: float):
    assert unit.earth_radius == radius
    assert unit.to_radians(radius * 2) == pytest.approx(2.0)
    assert unit.from_radians(0.5) == pytest.approx(radius / 2)


def test_format_helpers():
    assert format_number(10) == "10"
    assert format_number(10.0) == "10"
    assert format_number(0.1) == "0.1"
    assert format_number(-3) == "-3"

    assert format_value("abc") == "abc"
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(42) == "42"

    assert join_values(["joe", "bob", 3]) == "joe,bob,3"
    assert join_values(["a,b", "c"]) == "a,b,c"
    assert join_values([]) == ""
