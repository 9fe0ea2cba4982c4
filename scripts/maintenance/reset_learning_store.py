"""
Reset a profile's learning store.

DANGEROUS: This deletes all learning progress for the profile!
Only use when you want to start fresh.

Usage:
    python -m scripts.maintenance.reset_learning_store [--profile mia]
"""

import argparse

from vocab_core import storage


def main():
    parser = argparse.ArgumentParser(description="Reset a profile's learning store")
    parser.add_argument("--profile", default=None, help="Profile id (default: DEFAULT_PROFILE_ID or 'guest')")
    args = parser.parse_args()

    profile_id = args.profile or storage.get_default_profile_id()

    print("=" * 60)
    print("WARNING: Reset Learning Store")
    print("=" * 60)
    print()
    print(f"This will DELETE all learning progress for profile '{profile_id}':")
    print("  - Word weights, intervals and ease factors")
    print("  - Review counts, streaks and response times")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        print("\nResetting store...")
        storage.init_db()
        storage.reset_store(profile_id)
        print("✓ Store reset complete!")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
