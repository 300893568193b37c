"""Default city table for manual location selection."""

from minweather.config.schema import CityConfig

_CITY_COORDINATES: list[tuple[str, float, float]] = [
    ("New York, NY", 40.7128, -74.0060),
    ("Los Angeles, CA", 34.0522, -118.2437),
    ("Chicago, IL", 41.8781, -87.6298),
    ("Houston, TX", 29.7604, -95.3698),
    ("Phoenix, AZ", 33.4484, -112.0740),
    ("Philadelphia, PA", 39.9526, -75.1652),
    ("San Antonio, TX", 29.4241, -98.4936),
    ("San Diego, CA", 32.7157, -117.1611),
    ("Dallas, TX", 32.7767, -96.7970),
    ("San Jose, CA", 37.3382, -121.8863),
    ("Austin, TX", 30.2672, -97.7431),
    ("Jacksonville, FL", 30.3322, -81.6557),
    ("Fort Worth, TX", 32.7555, -97.3308),
    ("Columbus, OH", 39.9612, -82.9988),
    ("Charlotte, NC", 35.2271, -80.8431),
    ("San Francisco, CA", 37.7749, -122.4194),
    ("Indianapolis, IN", 39.7684, -86.1581),
    ("Seattle, WA", 47.6062, -122.3321),
    ("Denver, CO", 39.7392, -104.9903),
    ("Boston, MA", 42.3601, -71.0589),
    ("Nashville, TN", 36.1627, -86.7816),
    ("Detroit, MI", 42.3314, -83.0458),
    ("Portland, OR", 45.5152, -122.6784),
    ("Memphis, TN", 35.1495, -90.0490),
    ("Oklahoma City, OK", 35.4676, -97.5164),
    ("Las Vegas, NV", 36.1699, -115.1398),
    ("Louisville, KY", 38.2527, -85.7585),
    ("Baltimore, MD", 39.2904, -76.6122),
    ("Milwaukee, WI", 43.0389, -87.9065),
    ("Albuquerque, NM", 35.0844, -106.6504),
]

DEFAULT_CITIES: list[CityConfig] = [
    CityConfig(name=name, latitude=lat, longitude=lon)
    for name, lat, lon in _CITY_COORDINATES
]
