"""
Cleaning steps for admission records.

Each step takes a DataFrame and returns a new one, touching only its own
columns, so the steps can run in any order and re-running one is a no-op:

- find_duplicates / iter_duplicates: report exact duplicates, never drop them
- normalize_categoricals: Title Case the categorical text columns
- flag_missing_values: mark rows missing name, age or gender
- correct_billing_sign: make every billing amount non-negative
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field, asdict
from typing import Iterator
import pandas as pd
from healthcare_analytics.models import BUSINESS_FIELDS, RecordStore

log = logging.getLogger(__name__)

MISSING_VALUE = "Missing Value"
REQUIRED_FIELDS = ["name", "age", "gender"]
REVIEW_FIELDS = REQUIRED_FIELDS + ["medical_condition"]

# column -> allowed lower-case inputs (None means every value is rewritten)
NORMALIZATION_POLICY: dict[str, set[str] | None] = {
    "gender": {"male", "female"},
    "medical_condition": None,
    "doctor": None,
}

@dataclass
class CleaningStats:
    rows: int = 0
    duplicate_groups: int = 0
    normalized: dict[str, int] = field(default_factory=dict)
    flagged_missing: int = 0
    corrected_billing: int = 0
    discharge_before_admission: int = 0

    def as_dict(self) -> dict:
        return asdict(self)

# duplicates
def find_duplicates(df: pd.DataFrame) -> pd.DataFrame:
    """Groups of identical business fields occurring more than once."""
    if df.empty:
        return pd.DataFrame(columns=BUSINESS_FIELDS + ["duplicate_count"])
    counts = (
        df.groupby(BUSINESS_FIELDS, dropna=False, sort=False)
          .size()
          .reset_index(name="duplicate_count")
    )
    return counts[counts["duplicate_count"] > 1].reset_index(drop=True)

def iter_duplicates(df: pd.DataFrame) -> Iterator[tuple[tuple, int]]:
    for row in find_duplicates(df).itertuples(index=False):
        *values, count = row
        yield tuple(values), int(count)

# normalization
def title_case(series: pd.Series, allowed: set[str] | None = None) -> pd.Series:
    """
    Upper-case the first character and lower-case the rest.
    With `allowed`, only values whose lower-cased form is in it are rewritten.
    """
    out = series.copy()
    mask = series.notna()
    if allowed is not None:
        lowered = {a.lower() for a in allowed}
        mask &= series.astype(str).str.lower().isin(lowered)
    s = series[mask].astype(str)
    out.loc[mask] = s.str[:1].str.upper() + s.str[1:].str.lower()
    return out

def normalize_categoricals(df: pd.DataFrame, policy: dict[str, set[str] | None] = NORMALIZATION_POLICY) -> pd.DataFrame:
    df = df.copy()
    for col, allowed in policy.items():
        if col in df.columns:
            df[col] = title_case(df[col], allowed)
    return df

# missing values
def _missing_mask(df: pd.DataFrame, cols: list[str]) -> pd.Series:
    return df[cols].isna().any(axis=1)

def flag_missing_values(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    if "data_issue" not in df.columns:
        df["data_issue"] = None
    df["data_issue"] = df["data_issue"].astype(object)
    df.loc[_missing_mask(df, REQUIRED_FIELDS), "data_issue"] = MISSING_VALUE
    return df

def missing_value_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Rows with a null name, age, gender or medical condition, for review."""
    return df[_missing_mask(df, REVIEW_FIELDS)]

# billing
def correct_billing_sign(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    neg = df["billing_amount"] < 0
    df.loc[neg, "billing_amount"] = df.loc[neg, "billing_amount"].abs()
    return df

def discharge_before_admission(df: pd.DataFrame) -> pd.Series:
    admit = pd.to_datetime(df["date_of_admission"], errors="coerce")
    discharge = pd.to_datetime(df["discharge_date"], errors="coerce")
    return discharge < admit

CLEANING_STEPS = [
    ("normalize_categoricals", normalize_categoricals),
    ("flag_missing_values", flag_missing_values),
    ("correct_billing_sign", correct_billing_sign),
]

def _changed(before: pd.Series, after: pd.Series) -> int:
    both_null = before.isna() & after.isna()
    return int((before.ne(after) & ~both_null).sum())

def clean_records(df: pd.DataFrame) -> tuple[pd.DataFrame, CleaningStats]:
    """Run every cleaning step and collect what each one changed."""
    stats = CleaningStats(rows=len(df))
    stats.duplicate_groups = len(find_duplicates(df))
    if stats.duplicate_groups:
        log.warning("Found %d duplicate record groups (kept, not removed)", stats.duplicate_groups)

    store = RecordStore(df)
    for name, step in CLEANING_STEPS:
        store = store.apply(name, step)
    out = store.frame

    stats.normalized = {c: _changed(df[c], out[c]) for c in NORMALIZATION_POLICY if c in df.columns}
    stats.flagged_missing = int(out["data_issue"].eq(MISSING_VALUE).sum())
    stats.corrected_billing = int((df["billing_amount"] < 0).sum())

    remaining = int((out["billing_amount"] < 0).sum())
    if remaining:
        raise RuntimeError(f"{remaining} negative billing amounts remain after correction")

    stats.discharge_before_admission = int(discharge_before_admission(out).sum())
    if stats.discharge_before_admission:
        log.warning("%d records discharged before admission; stay averages include them",
                    stats.discharge_before_admission)

    log.info("Cleaning complete (%s): normalized=%s, flagged=%d, billing corrected=%d",
             " -> ".join(store.history), stats.normalized, stats.flagged_missing,
             stats.corrected_billing)
    return out, stats
