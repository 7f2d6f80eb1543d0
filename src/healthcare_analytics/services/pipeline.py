"""
Pipeline service - orchestrates transform, load and reporting
"""
from __future__ import annotations
import logging
from pathlib import Path
import pandas as pd
from sqlalchemy.engine import Engine
from healthcare_analytics.core.config import RAW_FILE, RECORDS_CLEAN, LOGS_DIR, REPORTS_DIR
from healthcare_analytics.core.db import create_tables, get_engine
from healthcare_analytics.transforms.transform_records import main as transform_records
from healthcare_analytics.load.load_to_db import load_records, fetch_records
from healthcare_analytics.reports.catalog import run_all

log = logging.getLogger(__name__)

def export_reports(reports: dict[str, pd.DataFrame], reports_dir: str | Path = REPORTS_DIR) -> list[Path]:
    reports_dir = Path(reports_dir)
    reports_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for name, df in reports.items():
        path = reports_dir / f"{name}.csv"
        df.to_csv(path, index=False)
        paths.append(path)
    log.info("Exported %d reports to %s", len(paths), reports_dir)
    return paths

def run_pipeline(
    source: str | Path = RAW_FILE,
    engine: Engine | None = None,
    clean_file: str | Path = RECORDS_CLEAN,
    logs_dir: str | Path = LOGS_DIR,
    reports_dir: str | Path = REPORTS_DIR,
) -> dict:
    """Execute the complete cleaning + reporting job"""
    try:
        log.info("Running transform...")
        cleaned, cleaning = transform_records(source, clean_file, logs_dir)

        log.info("Loading records to database...")
        engine = create_tables(engine or get_engine())
        loaded = load_records(cleaned, engine)

        log.info("Running reports...")
        reports = run_all(fetch_records(engine))
        export_reports(reports, reports_dir)

        stats = {
            "loaded": loaded,
            "reports": len(reports),
            **cleaning.as_dict(),
        }
        log.info("Pipeline complete: %s", stats)
        return stats

    except Exception as e:
        log.error("Pipeline failed: %s", e, exc_info=True)
        raise
