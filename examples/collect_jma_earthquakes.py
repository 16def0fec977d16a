"""
Single-source demo: JMA Earthquake List

Fetches the current JMA earthquake bulletin list, prints extraction
telemetry and depth statistics for the located events.
"""

import logging
import sys
from pathlib import Path

# Allow running from project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from quakefeed import EarthquakeRecord, JMAClient, summarize_depths

SHALLOW_KM = 10


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    client = JMAClient(timeout=30)

    print("=" * 60)
    print("JMA Earthquake List")
    print("=" * 60)
    print(f"Feed: {client.feed_url}")
    print()

    result = client.extract()

    # Telemetry
    print("--- Telemetry ---")
    print(f"  Success:    {result.success}")
    print(f"  Records:    {result.records}")
    print(f"  API calls:  {result.api_calls}")
    print(f"  Duration:   {result.duration_seconds:.2f}s")
    for warning in result.warnings:
        print(f"  Warning:    {warning}")
    print()

    if not result.success:
        print(f"Error: {result.error}")
        return

    df = result.data

    print("--- Most Recent 10 ---")
    for _, row in df.head(10).iterrows():
        print(f"  {row['latitude']:+6.1f} {row['longitude']:+7.1f}  {row['depth']:5.0f} km")
    print()

    # Depth statistics
    shallow_df = df[df["depth"] <= SHALLOW_KM]
    shallow = [EarthquakeRecord(**row) for row in shallow_df.to_dict("records")]
    stats = summarize_depths(shallow)
    print(f"--- Depth Statistics (<= {SHALLOW_KM} km) ---")
    print(f"  Events:       {stats['count']}")
    print(f"  Mean depth:   {stats['mean']:.1f} km")
    if stats["count"]:
        print(f"  Median depth: {stats['median']:.1f} km")
        print(f"  Max depth:    {stats['max']:.1f} km")


if __name__ == "__main__":
    main()
