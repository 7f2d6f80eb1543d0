"""
Print every report section from the records in the database.
Run: python -m healthcare_analytics.scripts.show_reports [section]
"""
import sys
import pandas as pd
from healthcare_analytics.load.load_to_db import fetch_records
from healthcare_analytics.reports.catalog import REPORTS, SECTIONS, run_all

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    section = argv[0] if argv else None

    df = fetch_records()
    print(f"Healthcare Database - Exploratory Reports ({len(df)} records)")
    results = run_all(df, section)

    current = None
    with pd.option_context("display.max_rows", 200, "display.width", 120):
        for name, out in results.items():
            report = REPORTS[name]
            if report.section != current:
                current = report.section
                print(f"\n=== {SECTIONS[current]} ===")
            print(f"\n{report.title}:")
            print(out.to_string(index=False) if not out.empty else "   (no rows)")

if __name__ == "__main__":
    main()
