"""
Print a learning progress report for a profile.

Usage:
    python -m scripts.maintenance.report_progress [--profile mia] [--top 20]
"""

import argparse

from vocab_core import analytics, storage


def main():
    parser = argparse.ArgumentParser(description="Print a learning progress report")
    parser.add_argument("--profile", default=None, help="Profile id (default: DEFAULT_PROFILE_ID or 'guest')")
    parser.add_argument("--top", type=int, default=20, help="Number of words to list (hardest first)")
    args = parser.parse_args()

    profile_id = args.profile or storage.get_default_profile_id()

    storage.init_db()
    store = storage.load_store(profile_id)
    report = analytics.build_learning_report(store)
    stats = report.stats

    print("=" * 60)
    print(f"Learning Report: {profile_id}")
    print("=" * 60)
    print(f"Total words:        {stats.total_words}")
    print(f"Mastered:           {stats.mastered}")
    print(f"Learning:           {stats.learning}")
    print(f"Needs practice:     {stats.struggling}")
    print(f"Avg response time:  {stats.avg_response_time} ms")
    print(f"Progress:           {report.progress_percent}%")

    if report.word_details.empty:
        print("\nNo words practiced yet.")
        return

    print(f"\nHardest {min(args.top, len(report.word_details))} words:")
    print("-" * 60)
    for row in report.word_details.head(args.top).itertuples(index=False):
        label = analytics.STATUS_LABELS[row.status]
        print(f"  {row.word:<20} weight={row.weight:.2f}  streak={row.correct_streak}  {label}")


if __name__ == "__main__":
    main()
