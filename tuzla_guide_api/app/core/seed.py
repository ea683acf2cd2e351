"""
Starting catalog loaded on the very first start.

The five Tuzla attractions below are inserted with ids 0–4 when no
persisted snapshot exists yet, so the guide is usable before any client
writes data.  ``seed_catalog`` is only ever called on an empty store;
see ``PersistenceService.startup``.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from ..schemas.attraction import Attraction, Location
from .store import GuideStore

logger = logging.getLogger(__name__)


SEED_ATTRACTIONS: List[Dict[str, Any]] = [
    {
        "name": "Pannonian Salt Lakes",
        "description": (
            "A complex of salt water lakes in the heart of the city, built over "
            "the old salt mines. Beaches, waterfalls and a summer promenade."
        ),
        "location": (44.5391, 18.6795),
        "category": "natural",
        "image_url": "images/pannonian-lakes.jpg",
        "audio_url": "audio/pannonian-lakes.mp3",
        "rating": 4.7,
        "price": 800,
        "languages": ["en", "bs", "de", "hr", "sr"],
        "tags": ["lake", "salt", "swimming", "summer", "nature"],
    },
    {
        "name": "Museum of Eastern Bosnia",
        "description": (
            "Regional museum with archaeological, ethnological and historical "
            "collections from the Neolithic period to the twentieth century."
        ),
        "location": (44.5379, 18.6737),
        "category": "museum",
        "image_url": "images/museum-eastern-bosnia.jpg",
        "audio_url": "audio/museum-eastern-bosnia.mp3",
        "rating": 4.4,
        "price": 300,
        "languages": ["en", "bs", "de"],
        "tags": ["history", "archaeology", "exhibition"],
    },
    {
        "name": "Freedom Square",
        "description": (
            "The main square of the old town, framed by restored facades from "
            "the Austro-Hungarian period and the historic salt well."
        ),
        "location": (44.5386, 18.6764),
        "category": "historical",
        "image_url": "images/freedom-square.jpg",
        "audio_url": "audio/freedom-square.mp3",
        "rating": 4.6,
        "price": 0,
        "languages": ["en", "bs", "hr", "sr"],
        "tags": ["old town", "square", "architecture", "cafes"],
    },
    {
        "name": "Turalibeg Mosque",
        "description": (
            "Sixteenth century mosque founded by Turali-beg, one of the oldest "
            "Ottoman monuments in the city."
        ),
        "location": (44.5374, 18.6781),
        "category": "historical",
        "image_url": "images/turalibeg-mosque.jpg",
        "audio_url": "audio/turalibeg-mosque.mp3",
        "rating": 4.5,
        "price": 0,
        "languages": ["en", "bs"],
        "tags": ["ottoman", "religion", "architecture"],
    },
    {
        "name": "Salt Works Museum",
        "description": (
            "Exhibition on the centuries of salt production that gave the city "
            "its name, with original brine pumps and evaporation pans."
        ),
        "location": (44.5408, 18.6862),
        "category": "museum",
        "image_url": "images/salt-works-museum.jpg",
        "audio_url": "audio/salt-works-museum.mp3",
        "rating": 4.2,
        "price": 400,
        "languages": ["en", "bs", "de"],
        "tags": ["salt", "industry", "history"],
    },
]


def seed_catalog(store: GuideStore) -> List[Attraction]:
    """Insert the starting catalog into ``store`` and return it.

    Ids come from the store's attraction counter, so on an empty store
    they are 0–4 and the counter ends at 5.
    """
    now = datetime.now(timezone.utc)
    seeded: List[Attraction] = []
    with store.lock:
        for entry in SEED_ATTRACTIONS:
            latitude, longitude = entry["location"]
            attraction = Attraction(
                id=store.allocate_attraction_id(),
                name=entry["name"],
                description=entry["description"],
                location=Location(latitude=latitude, longitude=longitude),
                category=entry["category"],
                image_url=entry["image_url"],
                audio_url=entry["audio_url"],
                rating=entry["rating"],
                price=entry["price"],
                languages=list(entry["languages"]),
                tags=list(entry["tags"]),
                created_at=now,
                updated_at=now,
            )
            store.put_attraction(attraction)
            seeded.append(attraction)
    logger.info("Seeded %d attractions", len(seeded))
    return seeded
