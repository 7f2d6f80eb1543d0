"""
Transform admission records: extract, clean, write tidy CSV and log duplicate / incomplete rows.
"""

from __future__ import annotations
import logging
from pathlib import Path
import pandas as pd
from healthcare_analytics.core.logging_setup import setup_logging
from healthcare_analytics.extract.extract_records import read_records
from healthcare_analytics.transforms.cleaning import clean_records, find_duplicates, missing_value_rows, CleaningStats
from healthcare_analytics.core.config import (
    RAW_FILE,
    RECORDS_CLEAN,
    LOGS_DIR,
    DUPLICATES_LOG,
    MISSING_LOG,
)

log = logging.getLogger(__name__)

def main(
    source: str | Path = RAW_FILE,
    clean_file: str | Path = RECORDS_CLEAN,
    logs_dir: str | Path = LOGS_DIR,
) -> tuple[pd.DataFrame, CleaningStats]:
    log.info("Loading records (extract)…")
    df_raw = read_records(source)

    log.info("Starting records transform")
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # logs are rewritten every run, header-only when empty
    dups = find_duplicates(df_raw)
    dup_log = logs_dir / DUPLICATES_LOG.name
    dups.to_csv(dup_log, index=False)
    if not dups.empty:
        log.info("Logged duplicate groups: %s (%d groups)", dup_log, len(dups))
    else:
        log.info("No duplicate records found")

    df, stats = clean_records(df_raw)

    incomplete = missing_value_rows(df)
    missing_log = logs_dir / MISSING_LOG.name
    incomplete.to_csv(missing_log, index=False)
    if not incomplete.empty:
        log.warning("Logged %d incomplete records: %s", len(incomplete), missing_log)

    clean_file = Path(clean_file)
    clean_file.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(clean_file, index=False)
    log.info("Saved cleaned records: %s (%d rows)", clean_file, len(df))
    return df, stats

if __name__ == "__main__":
    setup_logging()
    main()
