"""
Persistence lifecycle of the record stores.

The stores live in memory.  Their durable copy is a snapshot written to
the SQLite database:

* ``startup`` – apply migrations, then restore the persisted snapshot
  if one exists; otherwise seed the starting catalog and persist it
  right away so a later restart restores instead of seeding again.
* ``shutdown`` – persist the snapshot before the process goes away.
* ``after_write`` – called by the services after every successful
  mutation; persists when ``settings.persist_on_write`` is enabled.

A snapshot is saved as a whole: every table is cleared and refilled in
a single transaction.  With ``persist_on_write`` each mutation therefore
costs a rewrite of the whole database, done while the store lock is
held and inside the request handler.  That is fine for a city catalog
of a few hundred records; a larger deployment should turn the flag off
and rely on the shutdown snapshot, or move to per-row writes.
"""

import json
import logging
from typing import Optional

from ..core.config import settings
from ..core.db import get_connection, get_cursor, init_db
from ..core.seed import seed_catalog
from ..core.store import GuideStore, get_store
from ..schemas.attraction import Attraction, Location
from ..schemas.payment import PaymentTransaction
from ..schemas.review import Review
from ..schemas.snapshot import GuideSnapshot
from ..schemas.user import UserProfile

logger = logging.getLogger(__name__)

COUNTER_ATTRACTION = "next_attraction_id"
COUNTER_REVIEW = "next_review_id"


def save_snapshot(snapshot: GuideSnapshot) -> None:
    """Replace the persisted snapshot with ``snapshot``."""
    with get_cursor() as cursor:
        # Children first because of the foreign keys.
        cursor.execute("DELETE FROM reviews")
        cursor.execute("DELETE FROM payment_transactions")
        cursor.execute("DELETE FROM user_profiles")
        cursor.execute("DELETE FROM attractions")
        cursor.execute("DELETE FROM counters")

        cursor.executemany(
            """
            INSERT INTO attractions (id, name, description, latitude, longitude, category,
                                     image_url, audio_url, rating, price, languages, tags,
                                     created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    a.id, a.name, a.description, a.location.latitude, a.location.longitude,
                    a.category, a.image_url, a.audio_url, a.rating, a.price,
                    json.dumps(a.languages), json.dumps(a.tags),
                    a.created_at.isoformat(), a.updated_at.isoformat(),
                )
                for a in snapshot.attractions
            ],
        )
        cursor.executemany(
            """
            INSERT INTO reviews (id, attraction_id, user_id, rating, comment, photos, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    r.id, r.attraction_id, r.user_id, r.rating, r.comment,
                    json.dumps(r.photos), r.created_at.isoformat(),
                )
                for r in snapshot.reviews
            ],
        )
        cursor.executemany(
            """
            INSERT INTO user_profiles (id, username, email, preferred_language,
                                       visited_attractions, favorite_attractions,
                                       total_spent, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    p.id, p.username, p.email, p.preferred_language,
                    json.dumps(p.visited_attractions), json.dumps(p.favorite_attractions),
                    p.total_spent, p.created_at.isoformat(),
                )
                for p in snapshot.user_profiles
            ],
        )
        cursor.executemany(
            """
            INSERT INTO payment_transactions (id, user_id, attraction_id, amount, currency,
                                              payment_method, status, qr_code_data, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    t.id, t.user_id, t.attraction_id, t.amount, t.currency,
                    t.payment_method, t.status, t.qr_code_data, t.created_at.isoformat(),
                )
                for t in snapshot.payment_transactions
            ],
        )
        cursor.executemany(
            "INSERT INTO counters (name, value) VALUES (?, ?)",
            [
                (COUNTER_ATTRACTION, snapshot.next_attraction_id),
                (COUNTER_REVIEW, snapshot.next_review_id),
            ],
        )


def load_snapshot() -> Optional[GuideSnapshot]:
    """Read the persisted snapshot, or ``None`` if none was ever written."""
    conn = get_connection()
    try:
        cursor = conn.cursor()
        counters = {
            row["name"]: row["value"]
            for row in cursor.execute("SELECT name, value FROM counters").fetchall()
        }
        if not counters:
            return None
        attractions = [
            Attraction(
                id=row["id"],
                name=row["name"],
                description=row["description"],
                location=Location(latitude=row["latitude"], longitude=row["longitude"]),
                category=row["category"],
                image_url=row["image_url"],
                audio_url=row["audio_url"],
                rating=row["rating"],
                price=row["price"],
                languages=json.loads(row["languages"]),
                tags=json.loads(row["tags"]),
                created_at=row["created_at"],
                updated_at=row["updated_at"],
            )
            for row in cursor.execute("SELECT * FROM attractions ORDER BY id").fetchall()
        ]
        reviews = [
            Review(
                id=row["id"],
                attraction_id=row["attraction_id"],
                user_id=row["user_id"],
                rating=row["rating"],
                comment=row["comment"],
                photos=json.loads(row["photos"]),
                created_at=row["created_at"],
            )
            for row in cursor.execute("SELECT * FROM reviews ORDER BY id").fetchall()
        ]
        profiles = [
            UserProfile(
                id=row["id"],
                username=row["username"],
                email=row["email"],
                preferred_language=row["preferred_language"],
                visited_attractions=json.loads(row["visited_attractions"]),
                favorite_attractions=json.loads(row["favorite_attractions"]),
                total_spent=row["total_spent"],
                created_at=row["created_at"],
            )
            for row in cursor.execute("SELECT * FROM user_profiles ORDER BY id").fetchall()
        ]
        payments = [
            PaymentTransaction(
                id=row["id"],
                user_id=row["user_id"],
                attraction_id=row["attraction_id"],
                amount=row["amount"],
                currency=row["currency"],
                payment_method=row["payment_method"],
                status=row["status"],
                qr_code_data=row["qr_code_data"],
                created_at=row["created_at"],
            )
            for row in cursor.execute("SELECT * FROM payment_transactions ORDER BY id").fetchall()
        ]
        return GuideSnapshot(
            attractions=attractions,
            reviews=reviews,
            user_profiles=profiles,
            payment_transactions=payments,
            next_attraction_id=counters.get(COUNTER_ATTRACTION, 0),
            next_review_id=counters.get(COUNTER_REVIEW, 0),
        )
    finally:
        conn.close()


class PersistenceService:
    """Snapshot/restore hooks driven by the application lifecycle."""

    @classmethod
    def startup(cls, store: Optional[GuideStore] = None) -> bool:
        """Bring ``store`` (default: the process store) to its persisted state.

        Returns ``True`` when a snapshot was restored and ``False`` when
        the starting catalog was seeded.
        """
        store = store or get_store()
        init_db()
        snapshot = load_snapshot()
        if snapshot is not None:
            store.restore(snapshot)
            logger.info("Restored snapshot: %s", store.counts())
            return True
        if store.is_empty():
            seed_catalog(store)
        save_snapshot(store.snapshot())
        logger.info("No snapshot found; started with %s", store.counts())
        return False

    @classmethod
    def shutdown(cls, store: Optional[GuideStore] = None) -> None:
        store = store or get_store()
        save_snapshot(store.snapshot())
        logger.info("Snapshot written on shutdown: %s", store.counts())

    @classmethod
    def after_write(cls) -> None:
        """Persist after a mutation when ``persist_on_write`` is enabled.

        The in‑memory write has already succeeded at this point, so a
        storage failure is logged rather than reported to the caller;
        the shutdown snapshot writes the state again.
        """
        if not settings.persist_on_write:
            return
        try:
            save_snapshot(get_store().snapshot())
        except Exception:
            logger.exception("Failed to persist snapshot after write")
