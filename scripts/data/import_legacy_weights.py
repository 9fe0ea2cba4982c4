"""
Import a legacy word-weight map into a profile's learning store.

Older versions of the app saved a bare {"word": weight} JSON object.
This script:
1. Reads that JSON file
2. Migrates every numeric entry to a full learning record
3. Replaces the profile's store with the migrated one

A file that already carries a "version" key is imported as is.

Usage:
    python -m scripts.data.import_legacy_weights word_weights.json [--profile mia] [--dry-run]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from vocab_core import storage
from vocab_core.scheduler import load_learning_store


def read_weights(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Missing weights file: {path}")

    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, found {type(data).__name__}")
    return data


def main():
    parser = argparse.ArgumentParser(description="Import legacy word weights into a learning store")
    parser.add_argument("path", type=Path, help="JSON file with {word: weight}")
    parser.add_argument(
        "--profile",
        default=None,
        help="Profile id to import into (default: DEFAULT_PROFILE_ID or 'guest')"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be imported without writing to the database"
    )
    args = parser.parse_args()

    weights = read_weights(args.path)
    store = load_learning_store(weights)
    profile_id = args.profile or storage.get_default_profile_id()

    print(f"Entries in file:  {len(weights)}")
    print(f"Words migrated:   {len(store)}")

    if args.dry_run:
        print("Dry run - nothing written.")
        return

    storage.init_db()
    store = storage.import_legacy_weights(weights, profile_id)
    print(f"✓ Saved store for profile '{profile_id}' ({storage.get_database_url()})")


if __name__ == "__main__":
    main()
