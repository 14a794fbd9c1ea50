#!/usr/bin/env python3
"""
Record a day's water usage total into the daily_water_usage ledger
"""
import argparse
import sys
from datetime import date

from soil_server.database import SessionLocal
from soil_server.exceptions import StorageError
from soil_server.init_db import init_database
from soil_server.services.water_usage import insert_water_usage

def main(argv=None):
    parser = argparse.ArgumentParser(description="Insert a daily water usage total")
    parser.add_argument("usage", type=float, help="water used on that day")
    parser.add_argument("--date", default=date.today().isoformat(),
                        help="local calendar date, YYYY-MM-DD (default: today)")
    args = parser.parse_args(argv)

    init_database()
    db = SessionLocal()
    try:
        row = insert_water_usage(db, args.date, args.usage)
        print(f"Recorded {row.water_usage} for {row.date}")
        return 0
    except StorageError as e:
        print(f"Error recording water usage: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()

if __name__ == "__main__":
    sys.exit(main())
