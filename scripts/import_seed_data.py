#!/usr/bin/env python3
"""
Import seed turfs into local database for testing.

Usage:
    python scripts/import_seed_data.py

Reads from data/seed_turfs.json and imports into local database.
Requires DATABASE_URL to be set in .env file.
"""

import json
import sys
from pathlib import Path

from turfzone.config import DATA_DIR
from turfzone.database import get_db, init_db


def import_data():
    """Import seed turfs from JSON file."""
    seed_file = DATA_DIR / "seed_turfs.json"

    if not seed_file.exists():
        print(f"Error: {seed_file} not found")
        sys.exit(1)

    with open(seed_file) as f:
        data = json.load(f)

    turfs = data.get("turfs", [])
    print(f"Loading seed data from {seed_file}")
    print(f"  Turfs: {len(turfs)}")

    # Initialize database schema
    print("\nInitializing database schema...")
    init_db()

    with get_db() as conn:
        cursor = conn.cursor()
        imported = 0

        for turf in turfs:
            cursor.execute("SELECT id FROM turfs WHERE name = %s AND category = %s", (turf["name"], turf["category"]))
            if cursor.fetchone():
                continue
            cursor.execute("""
                INSERT INTO turfs (name, address, hourly_rate, operating_hours, category)
                VALUES (%s, %s, %s, %s, %s)
            """, (
                turf["name"],
                turf["address"],
                turf["hourly_rate"],
                turf.get("operating_hours", "06:00 - 23:00"),
                turf["category"]
            ))
            imported += 1
        print(f"Imported {imported} turfs ({len(turfs) - imported} already present)")

    print("\nSeed data imported successfully!")


if __name__ == "__main__":
    import_data()
