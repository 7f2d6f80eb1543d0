"""
Extract healthcare admission records from the raw CSV, typed DataFrame.
"""

from __future__ import annotations
import logging
from pathlib import Path
import pandas as pd
from healthcare_analytics.core.config import RAW_FILE
from healthcare_analytics.models.tables import BUSINESS_FIELDS, DATE_COLUMNS

log = logging.getLogger(__name__)

MISSING_TOKENS = {t.lower() for t in ["", " ", "NA", "N/A", "NULL", "None", "nan"]}
INT_COLUMNS = ["age", "room_number"]
TEXT_COLUMNS = [c for c in BUSINESS_FIELDS if c not in INT_COLUMNS + DATE_COLUMNS + ["billing_amount"]]

def _to_snake(header: str) -> str:
    return "_".join(str(header).strip().lower().split())

def _normalize_missing(series: pd.Series) -> pd.Series:
    """
    Map common missing tokens (case/space-insensitive) to NA.
    """
    s = series.astype(str)
    mask = s.str.strip().str.lower().isin(MISSING_TOKENS) | series.isna()
    out = series.astype(object).copy()
    out[mask] = None
    return out

def coerce_types(df: pd.DataFrame) -> pd.DataFrame:
    """Cast the business fields to their schema types; bad values become null."""
    df = df.copy()
    for col in TEXT_COLUMNS:
        df[col] = _normalize_missing(df[col])
        m = df[col].notna()
        df.loc[m, col] = df.loc[m, col].astype(str).str.strip()
    for col in INT_COLUMNS:
        df[col] = pd.to_numeric(_normalize_missing(df[col]), errors="coerce").round().astype("Int64")
    df["billing_amount"] = pd.to_numeric(_normalize_missing(df["billing_amount"]), errors="coerce")
    for col in DATE_COLUMNS:
        df[col] = pd.to_datetime(_normalize_missing(df[col]), errors="coerce")
    return df

def read_records(csv_path: str | Path = RAW_FILE) -> pd.DataFrame:
    """Read the raw admissions CSV and rename its headers to column names."""
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Source file not found: {csv_path}")

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    df.columns = [_to_snake(c) for c in df.columns]

    missing = [c for c in BUSINESS_FIELDS if c not in df.columns]
    if missing:
        log.warning("Missing expected columns: %s", missing)
        for col in missing:
            df[col] = None
    extra = [c for c in df.columns if c not in BUSINESS_FIELDS + ["data_issue"]]
    if extra:
        log.info("Ignoring unexpected columns: %s", extra)

    df = coerce_types(df[BUSINESS_FIELDS])
    df["data_issue"] = None
    log.info("Extracted records: %s (%d rows)", csv_path, len(df))
    return df
