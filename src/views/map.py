"""Map view: resolve entry locations against a static table of Tokyo places."""

import logging
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel

from models import Category, ScheduleEntry

logger = logging.getLogger(__name__)

Coordinates = Tuple[float, float]

TOKYO_CENTER: Coordinates = (35.6762, 139.6503)
DEFAULT_ZOOM = 11

# Checked in order; the first name found inside the location wins.
LOCATION_COORDINATES: List[Tuple[str, Coordinates]] = [
    ("센소지", (35.7148, 139.7967)),
    ("도쿄 스카이트리", (35.7101, 139.8107)),
    ("아키하바라", (35.7022, 139.7742)),
    ("메이지 신궁", (35.6764, 139.6993)),
    ("하라주쿠", (35.6702, 139.7027)),
    ("시부야", (35.6595, 139.7004)),
    ("츠키지", (35.6654, 139.7707)),
    ("황궁", (35.6852, 139.7528)),
    ("긴자", (35.6717, 139.7646)),
    ("오다이바", (35.6262, 139.7744)),
    ("우에노", (35.7141, 139.7774)),
    ("나리타", (35.7720, 140.3929)),
    ("senso-ji", (35.7148, 139.7967)),
    ("sensoji", (35.7148, 139.7967)),
    ("skytree", (35.7101, 139.8107)),
    ("akihabara", (35.7022, 139.7742)),
    ("meiji", (35.6764, 139.6993)),
    ("harajuku", (35.6702, 139.7027)),
    ("shibuya", (35.6595, 139.7004)),
    ("tsukiji", (35.6654, 139.7707)),
    ("imperial palace", (35.6852, 139.7528)),
    ("ginza", (35.6717, 139.7646)),
    ("odaiba", (35.6262, 139.7744)),
    ("ueno", (35.7141, 139.7774)),
    ("narita", (35.7720, 140.3929)),
]

CATEGORY_STYLES = {
    Category.sightseeing: {"emoji": "🏛️", "color": "#3b82f6", "label": "관광"},
    Category.meal: {"emoji": "🍜", "color": "#f97316", "label": "식사"},
    Category.shopping: {"emoji": "🛍️", "color": "#a855f7", "label": "쇼핑"},
    Category.transit: {"emoji": "🚌", "color": "#6b7280", "label": "이동"},
}


class MapMarker(BaseModel):
    id: int
    day: int
    time: str
    title: str
    category: Category
    location: str
    description: Optional[str] = None
    lat: float
    lng: float
    emoji: str
    color: str


def find_coordinates(location: Optional[str]) -> Optional[Coordinates]:
    """Look up a location by substring. Unknown places return None."""
    if not location:
        return None
    haystack = location.lower()
    for name, coords in LOCATION_COORDINATES:
        if name in haystack:
            return coords
    return None


def build_markers(entries: Iterable[ScheduleEntry]) -> List[MapMarker]:
    """Markers for every entry whose location is known. Others are left off the map."""
    markers = []
    for entry in entries:
        coords = find_coordinates(entry.location)
        if coords is None:
            if entry.location:
                logger.debug(f"No coordinates for location '{entry.location}'")
            continue
        style = CATEGORY_STYLES[entry.category]
        markers.append(
            MapMarker(
                id=entry.id,
                day=entry.day,
                time=entry.time.strftime("%H:%M"),
                title=entry.title,
                category=entry.category,
                location=entry.location,
                description=entry.description,
                lat=coords[0],
                lng=coords[1],
                emoji=style["emoji"],
                color=style["color"],
            )
        )
    return markers
