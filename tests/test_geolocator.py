from unittest.mock import MagicMock, patch

import pytest
from geopy.exc import GeocoderUnavailable

from Geolocator import FALLBACK_LOCATION, Geolocator
from SkyErrors import PositionUnavailable


def test_explicit_coordinates_win():
    with patch("Geolocator.Nominatim") as nominatim:
        assert Geolocator().locate(city=None, latitude=52.52, longitude=13.405) == (52.52, 13.405)
    nominatim.assert_not_called()


def test_city_is_geocoded():
    location = MagicMock(latitude=48.8566, longitude=2.3522)
    with patch("Geolocator.Nominatim") as nominatim:
        nominatim.return_value.geocode.return_value = location
        assert Geolocator(user_agent="test").locate(city="Paris, France") == (48.8566, 2.3522)

    nominatim.assert_called_once_with(user_agent="test")
    nominatim.return_value.geocode.assert_called_once_with("Paris, France", timeout=10)


def test_unknown_city_falls_back(caplog):
    with patch("Geolocator.Nominatim") as nominatim:
        nominatim.return_value.geocode.return_value = None
        assert Geolocator().locate(city="Atlantis") == FALLBACK_LOCATION
    assert "using default coords" in caplog.text


def test_geocoder_error_falls_back(caplog):
    with patch("Geolocator.Nominatim") as nominatim:
        nominatim.return_value.geocode.side_effect = GeocoderUnavailable("offline")
        assert Geolocator(fallback=(1.0, 2.0)).locate(city="Berlin") == (1.0, 2.0)
    assert "geocoding 'Berlin' failed" in caplog.text


def test_no_location_falls_back():
    assert Geolocator().locate() == FALLBACK_LOCATION


def test_resolve_signals_unavailable():
    with pytest.raises(PositionUnavailable):
        Geolocator().resolve()
    with pytest.raises(PositionUnavailable, match="together"):
        Geolocator().resolve(latitude=10.0)
