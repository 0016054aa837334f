#!/usr/bin/env python3
"""
Seed the Exercises catalog from the free-exercise-db dataset.

Downloads the dataset, maps each entry to an Exercises row and inserts the
ones whose name is not in the table yet. Safe to re-run.

Usage:
    python scripts/seed_exercises.py [--dry-run] [--batch-size N]

Options:
    --dry-run        Preview how many rows would be inserted
    --batch-size N   Rows checked and inserted per request (default 200)
"""
import os
import sys
import argparse
from typing import Any, Dict, List, Optional

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

import httpx
from supabase import create_client

from infrastructure.db.exercises_repository import EXERCISES_TABLE

EXERCISES_JSON_URL = (
    "https://raw.githubusercontent.com/yuhonas/free-exercise-db/main/dist/exercises.json"
)
IMAGE_BASE_URL = "https://raw.githubusercontent.com/yuhonas/free-exercise-db/main/exercises/"
DEFAULT_BATCH_SIZE = 200


def get_supabase_client():
    """Create Supabase client with service role key."""
    url = os.environ.get("SUPABASE_URL")
    key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

    if not url or not key:
        print("ERROR: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        sys.exit(1)

    return create_client(url, key)


def pick_muscle_group(entry: Dict[str, Any]) -> str:
    """First primary muscle, else the category, else "unknown"."""
    primary = entry.get("primaryMuscles") or []
    if primary:
        return primary[0]
    return entry.get("category") or "unknown"


def build_description(entry: Dict[str, Any]) -> Optional[str]:
    parts = []
    instructions = entry.get("instructions") or []
    if instructions:
        parts.append("\n".join(instructions))
    if entry.get("equipment"):
        parts.append(f"Equipment: {entry['equipment']}")
    secondary = entry.get("secondaryMuscles") or []
    if secondary:
        parts.append(f"Secondary: {', '.join(secondary)}")
    description = "\n\n".join(parts).strip()
    return description or None


def pick_image_url(entry: Dict[str, Any]) -> Optional[str]:
    images = entry.get("images") or []
    if images:
        return IMAGE_BASE_URL + images[0]
    if entry.get("id"):
        return f"{IMAGE_BASE_URL}{entry['id']}/0.jpg"
    return None


def to_exercise_row(entry: Dict[str, Any]) -> Dict[str, Any]:
    """Map a dataset entry to an Exercises insert payload."""
    return {
        "name": entry["name"],
        "muscle_group": pick_muscle_group(entry),
        "description": build_description(entry),
        "image_url": pick_image_url(entry),
        "video_url": None,
    }


def download_dataset(url: str = EXERCISES_JSON_URL) -> List[Dict[str, Any]]:
    response = httpx.get(url, timeout=60.0, follow_redirects=True)
    response.raise_for_status()
    return response.json()


def seed_exercises(dry_run: bool = False, batch_size: int = DEFAULT_BATCH_SIZE) -> int:
    """
    Insert catalog rows that do not exist yet, matched by name.

    Args:
        dry_run: If True, only report what would be inserted
        batch_size: Number of dataset rows handled per round trip

    Returns:
        Number of rows inserted (or that would be inserted)
    """
    supabase = get_supabase_client()

    print("Downloading dataset...")
    dataset = download_dataset()
    print(f"Downloaded {len(dataset)} exercises")

    rows = [to_exercise_row(entry) for entry in dataset if entry.get("name")]

    inserted = 0
    processed = 0
    for start in range(0, len(rows), batch_size):
        chunk = rows[start:start + batch_size]
        names = [row["name"] for row in chunk]

        existing = supabase.table(EXERCISES_TABLE) \
            .select("name") \
            .in_("name", names) \
            .execute()
        existing_names = {row["name"] for row in existing.data or []}
        to_insert = [row for row in chunk if row["name"] not in existing_names]

        if to_insert and not dry_run:
            supabase.table(EXERCISES_TABLE).insert(to_insert).execute()

        inserted += len(to_insert)
        processed += len(chunk)
        action = "would insert" if dry_run else "inserted"
        print(f"  Processed {processed}/{len(rows)} | {action} {len(to_insert)} new in this batch")

    return inserted


def main():
    parser = argparse.ArgumentParser(
        description="Seed the Exercises catalog from free-exercise-db"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview changes without updating database"
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=DEFAULT_BATCH_SIZE,
        help="Rows per batch"
    )

    args = parser.parse_args()

    print("Seed exercise catalog")
    print("=" * 50)

    if args.dry_run:
        print("DRY RUN MODE - No changes will be made")

    try:
        total = seed_exercises(dry_run=args.dry_run, batch_size=args.batch_size)
    except httpx.HTTPError as e:
        print(f"ERROR: could not download dataset: {e}")
        sys.exit(1)

    print()
    print("=" * 50)
    print(f"Seed complete: {total} new exercise(s){' (dry run)' if args.dry_run else ''}")


if __name__ == "__main__":
    main()
