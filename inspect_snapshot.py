#!/usr/bin/env python3
"""
Inspect a persisted Tuzla Guide snapshot (SQLite).

This script only reads the database.  It prints the number of records in
each store, the id counters and, optionally, the reviews and payments
of one attraction.  Useful after an upgrade to check that the restart
will restore what the previous process wrote.

Usage:
    python inspect_snapshot.py --db ./tuzla_guide_api/tuzla_guide.db
    python inspect_snapshot.py --db ./tuzla_guide_api/tuzla_guide.db --attraction 2
"""

import argparse
import os
import sqlite3
import sys

TABLES = ("attractions", "reviews", "user_profiles", "payment_transactions")


def main():
    ap = argparse.ArgumentParser(description="Inspect a Tuzla Guide snapshot (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./tuzla_guide_api/tuzla_guide.db)")
    ap.add_argument("--attraction", type=int, help="Also list reviews and payments of this attraction id")
    args = ap.parse_args()

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        sys.exit(1)

    conn = sqlite3.connect(args.db)
    conn.row_factory = sqlite3.Row
    try:
        cur = conn.cursor()
        counters = cur.execute("SELECT name, value FROM counters ORDER BY name").fetchall()
        if not counters:
            print("[!] No snapshot has been written to this database yet.", file=sys.stderr)
            sys.exit(2)
        for name in TABLES:
            count = cur.execute(f"SELECT COUNT(*) AS n FROM {name}").fetchone()["n"]
            print(f"{name:<22} {count}")
        for row in counters:
            print(f"{row['name']:<22} {row['value']}")

        if args.attraction is not None:
            attraction = cur.execute(
                "SELECT name, rating FROM attractions WHERE id = ?", (args.attraction,)
            ).fetchone()
            if not attraction:
                print(f"[!] No attraction with id {args.attraction}", file=sys.stderr)
                sys.exit(3)
            print(f"\n[{args.attraction}] {attraction['name']} (rating {attraction['rating']:.2f})")
            for review in cur.execute(
                "SELECT id, user_id, rating, comment FROM reviews WHERE attraction_id = ? ORDER BY id",
                (args.attraction,),
            ):
                print(f"  review {review['id']}: {review['rating']}/5 by {review['user_id']} {review['comment']!r}")
            for payment in cur.execute(
                "SELECT id, amount, currency, status FROM payment_transactions WHERE attraction_id = ?",
                (args.attraction,),
            ):
                print(f"  payment {payment['id']}: {payment['amount']} {payment['currency']} [{payment['status']}]")
    finally:
        conn.close()

if __name__ == "__main__":
    main()
