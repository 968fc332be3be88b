"""Place-name resolution.

`LocationResolver.resolve` is a pure lookup over a small gazetteer and never
fails. `LocationResolver.locate` adds one optional geocoder call for names
the gazetteer does not know.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .engines.base import GeocodingProvider
from .engines.types import Location, RegionClass
from .exceptions import UpstreamMalformed

logger = logging.getLogger(__name__)

GAZETTEER: Mapping[str, Location] = {
    "nadia": Location(
        name="Nadia",
        country="India",
        state="West Bengal",
        lat=23.4,
        lon=88.5,
        region=RegionClass.TROPICAL,
    ),
    "mumbai": Location(
        name="Mumbai",
        country="India",
        state="Maharashtra",
        lat=19.0760,
        lon=72.8777,
        region=RegionClass.COASTAL,
    ),
    "kolkata": Location(
        name="Kolkata",
        country="India",
        state="West Bengal",
        lat=22.5726,
        lon=88.3639,
        region=RegionClass.COASTAL,
    ),
    "delhi": Location(
        name="Delhi",
        country="India",
        state="Delhi",
        lat=28.7041,
        lon=77.1025,
        region=RegionClass.MODERATE,
    ),
    "chennai": Location(
        name="Chennai",
        country="India",
        state="Tamil Nadu",
        lat=13.0827,
        lon=80.2707,
        region=RegionClass.COASTAL,
    ),
    "bangalore": Location(
        name="Bangalore",
        country="India",
        state="Karnataka",
        lat=12.9716,
        lon=77.5946,
        region=RegionClass.TROPICAL,
    ),
    "hyderabad": Location(
        name="Hyderabad",
        country="India",
        state="Telangana",
        lat=17.3850,
        lon=78.4867,
        region=RegionClass.MODERATE,
    ),
    "kochi": Location(
        name="Kochi",
        country="India",
        state="Kerala",
        lat=9.9312,
        lon=76.2673,
        region=RegionClass.COASTAL,
    ),
    "rajasthan": Location(
        name="Rajasthan",
        country="India",
        state="Rajasthan",
        lat=27.0238,
        lon=74.2179,
        region=RegionClass.ARID,
    ),
    "punjab": Location(
        name="Punjab",
        country="India",
        state="Punjab",
        lat=31.1471,
        lon=75.3412,
        region=RegionClass.ARID,
    ),
    "gujarat": Location(
        name="Gujarat",
        country="India",
        state="Gujarat",
        lat=22.2587,
        lon=71.1924,
        region=RegionClass.ARID,
    ),
    "goa": Location(
        name="Goa",
        country="India",
        state="Goa",
        lat=15.2993,
        lon=74.1240,
        region=RegionClass.COASTAL,
    ),
}

# Checked in order against geocoder display names.
STATE_REGIONS: tuple[tuple[str, RegionClass], ...] = (
    ("goa", RegionClass.COASTAL),
    ("maharashtra", RegionClass.COASTAL),
    ("rajasthan", RegionClass.ARID),
    ("gujarat", RegionClass.ARID),
    ("punjab", RegionClass.ARID),
    ("kerala", RegionClass.TROPICAL),
    ("karnataka", RegionClass.TROPICAL),
    ("tamil nadu", RegionClass.TROPICAL),
    ("west bengal", RegionClass.TROPICAL),
)

CENTROID_COUNTRY = "India"
CENTROID_LAT = 20.5937
CENTROID_LON = 78.9629


def normalize_query(query: str) -> str:
    """Lowercase, trim and collapse inner whitespace."""

    return " ".join(query.lower().split())


def classify_region(text: str) -> RegionClass:
    normalized = normalize_query(text)
    for state, region in STATE_REGIONS:
        if state in normalized:
            return region
    return RegionClass.MODERATE


class LocationResolver:
    """Resolve free text to a `Location`, always returning a best guess."""

    def __init__(
        self,
        *,
        gazetteer: Mapping[str, Location] | None = None,
        geocoder: GeocodingProvider | None = None,
    ) -> None:
        self.gazetteer = GAZETTEER if gazetteer is None else gazetteer
        self.geocoder = geocoder

    def lookup(self, query: str) -> Location | None:
        key = normalize_query(query)
        if not key:
            return None
        if key in self.gazetteer:
            return self.gazetteer[key]
        for name, location in self.gazetteer.items():
            if name in key or key in name:
                return location
        return None

    def centroid(self, query: str) -> Location:
        return Location(
            name=query.strip() or CENTROID_COUNTRY,
            country=CENTROID_COUNTRY,
            state="Unknown",
            lat=CENTROID_LAT,
            lon=CENTROID_LON,
            region=RegionClass.MODERATE,
        )

    def resolve(self, query: str) -> Location:
        found = self.lookup(query)
        if found is not None:
            return found
        logger.info("insights.resolve.fallback query=%r", query)
        return self.centroid(query)

    async def locate(self, query: str) -> Location:
        """Like `resolve`, consulting the geocoder on a gazetteer miss.

        Raises `UpstreamError` only from the geocoder; callers treat that as
        a signal to use `resolve`.
        """

        found = self.lookup(query)
        if found is not None or self.geocoder is None:
            return found or self.resolve(query)

        result = await self.geocoder.search(query.strip())
        try:
            return Location(
                name=result.display_name,
                country=result.country,
                state=result.state,
                lat=result.lat,
                lon=result.lon,
                region=classify_region(
                    f"{result.state} {result.display_name}"
                ),
            )
        except ValueError as exc:
            raise UpstreamMalformed(self.geocoder.name, str(exc)) from exc

