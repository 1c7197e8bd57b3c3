import pytest

from planeprojection.conversion import *


def test_convert_to_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1.0, 'km', 1000.0),
        (1.0, 'mi', 1609.34),
        (1.0, 'ft', 0.3048),
        (1.0, 'nmi', 1852.0),
        (1.0, 'yd', 0.9144),
        (2.0, 'KM', 2000.0),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_to_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-6)

    with pytest.raises(ValueError):
        convert_to_meters(1.0, 'furlong')


def test_convert_from_meters():
    assert convert_from_meters(16373.0, 'km') == pytest.approx(16.373)
    assert convert_from_meters(1852.0, 'nmi') == pytest.approx(1.0)
    assert convert_from_meters(convert_to_meters(3.5, 'mi'), 'mi') == pytest.approx(3.5)

    with pytest.raises(ValueError):
        convert_from_meters(1.0, 'furlong')


def test_dms_to_degrees():
    assert dms_to_degrees((0, 0, 0.0, 'E')) == 0.
    assert dms_to_degrees((51, 30, 35.514, 'N')) == pytest.approx(51.509865)
    assert dms_to_degrees((0, 7, 5.1312, 'W')) == pytest.approx(-0.118092)
    assert dms_to_degrees((33, 52, 4.0, 'S')) == pytest.approx(-33.867778, abs=1e-6)


def test_degrees_to_dms():
    assert degrees_to_dms(51.509865, is_latitude=True) == (51, 30, 35.514, 'N')
    assert degrees_to_dms(-0.118092, is_latitude=False) == (0, 7, 5.1312, 'W')
    assert degrees_to_dms(-33.5, is_latitude=True) == (33, 30, 0.0, 'S')
    assert degrees_to_dms(13.0, is_latitude=False) == (13, 0, 0.0, 'E')
