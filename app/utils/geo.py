# app/utils/geo.py
import math
from urllib.parse import quote

MAPS_SEARCH_URL = "https://maps.google.com/?q="


def parse_location(location: str | None) -> tuple[str, str] | None:
    """Split a "latitude,longitude" string; None unless both parts are numeric."""
    if not location:
        return None
    parts = location.split(",")
    if len(parts) != 2:
        return None
    lat, lng = parts[0].strip(), parts[1].strip()
    try:
        if not all(math.isfinite(float(v)) for v in (lat, lng)):
            return None
    except ValueError:
        return None
    return lat, lng


def maps_url(location: str | None) -> str:
    """Google Maps search link; an empty location yields an empty query."""
    return MAPS_SEARCH_URL + quote(location or "", safe=",.-")
