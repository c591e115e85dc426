#!/usr/bin/env python3
"""
Script to promote female calves that reached the minimum age to heifers.

Runs the same reclassification the API schedules in the background, once,
against every farm or a single one.

Usage:
  python scripts/reclassify_calves.py [--min-age-months 12] [--farm-id UUID]
"""

import asyncio
import sys
from pathlib import Path
from uuid import UUID

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.infrastructure.db.session import create_engine, create_session_factory
from src.infrastructure.scheduler.reclassification_tasks import reclassify_calves


async def run(min_age_months: int, farm_id: UUID | None, database_url: str | None) -> int:
    settings = get_settings()
    engine = create_engine(database_url or settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        result = await reclassify_calves(session_factory, min_age_months, farm_id=farm_id)
    finally:
        await engine.dispose()

    if result is None:
        print("\n❌ Reclassification failed, see the log for details")
        return 1
    print(f"\n✅ {result.count} animals reclassified (min age {result.min_age_months} months)")
    for animal_id in result.animal_ids:
        print(f"   - {animal_id}")
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Promote female calves to heifers by age",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Every farm, default minimum age
  python scripts/reclassify_calves.py

  # One farm, 15 months
  python scripts/reclassify_calves.py --farm-id 12345678-1234-5678-1234-567812345678
  --min-age-months 15
        """,
    )
    parser.add_argument(
        "--min-age-months",
        type=int,
        default=None,
        help="Minimum age in months (defaults to RECLASSIFICATION_MIN_AGE_MONTHS)",
    )
    parser.add_argument("--farm-id", help="Restrict to one farm (optional)")
    parser.add_argument("--database-url", help="Override DATABASE_URL (optional)")

    args = parser.parse_args()

    farm_uuid = None
    if args.farm_id:
        try:
            farm_uuid = UUID(args.farm_id)
        except ValueError:
            print(f"❌ Error: '{args.farm_id}' is not a valid UUID")
            sys.exit(1)

    min_age = args.min_age_months or get_settings().reclassification_min_age_months
    sys.exit(asyncio.run(run(min_age, farm_uuid, args.database_url)))
