"""
Load cleaned admission records into the database and read them back.
- Replaces the table contents on every run; the cleaned frame is the source of truth.
- No validation here. Just coerce types and insert everything present in the frame.
"""

from __future__ import annotations
import logging
import numpy as np
import pandas as pd
from sqlalchemy import delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from healthcare_analytics.core.db import get_engine
from healthcare_analytics.models import HealthcareRecord, RECORD_COLUMNS, DATE_COLUMNS

log = logging.getLogger(__name__)

def _nan_to_none_dicts(df: pd.DataFrame, cols: list[str]) -> list[dict]:
    """Convert a DataFrame subset to list-of-dicts and replace NaN/NaT/NA with None."""
    out = []
    for rec in df[cols].to_dict("records"):
        out.append({
            k: None if pd.isna(v) else (v.item() if isinstance(v, np.generic) else v)
            for k, v in rec.items()
        })
    return out

def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    for col in DATE_COLUMNS:
        df[col] = pd.to_datetime(df[col], errors="coerce").dt.date
    for col in ("age", "room_number"):
        df[col] = pd.to_numeric(df[col], errors="coerce").round().astype("Int64")
    df["billing_amount"] = pd.to_numeric(df["billing_amount"], errors="coerce").round(2)
    return df

def load_records(df: pd.DataFrame, engine: Engine | None = None) -> int:
    engine = engine or get_engine()
    df = _prepare(df)
    cols = [c for c in RECORD_COLUMNS if c in df.columns]
    log.info("Records: loading %d rows", len(df))

    with Session(engine) as session:
        try:
            removed = session.execute(delete(HealthcareRecord)).rowcount
            if removed:
                log.info("Records: cleared %d existing rows", removed)
            objs = [HealthcareRecord(**rec) for rec in _nan_to_none_dicts(df, cols)]
            session.bulk_save_objects(objs)
            session.commit()
            log.info("Load committed successfully")
        except Exception as e:
            session.rollback()
            log.error("Load failed; rolled back: %s", e, exc_info=True)
            raise

    log.info("Records: inserted %d", len(objs))
    return len(objs)

def fetch_records(engine: Engine | None = None) -> pd.DataFrame:
    """Read every record back, typed the same way as the extract step."""
    engine = engine or get_engine()
    columns = [getattr(HealthcareRecord, c) for c in RECORD_COLUMNS]
    stmt = select(*columns).order_by(HealthcareRecord.id)
    with engine.connect() as conn:
        df = pd.read_sql(stmt, conn, parse_dates=DATE_COLUMNS)
    for col in ("age", "room_number"):
        df[col] = pd.to_numeric(df[col], errors="coerce").astype("Int64")
    df["billing_amount"] = pd.to_numeric(df["billing_amount"], errors="coerce")
    log.info("Fetched %d records", len(df))
    return df
