"""
Hospital & admission insights.
"""

from __future__ import annotations
import pandas as pd
from healthcare_analytics.reports.base import count_by, mean_by, sort_desc, stay_days

def admissions_per_hospital(df: pd.DataFrame) -> pd.DataFrame:
    return sort_desc(count_by(df, ["hospital"], "admission_count"), "admission_count")

def monthly_admissions(df: pd.DataFrame) -> pd.DataFrame:
    """Admissions per calendar month, oldest first."""
    admitted = pd.to_datetime(df["date_of_admission"], errors="coerce")
    frame = pd.DataFrame({
        "admission_year": admitted.dt.year.astype("Int64"),
        "admission_month": admitted.dt.month.astype("Int64"),
    })
    return count_by(frame, ["admission_year", "admission_month"], "monthly_admissions")

def avg_stay_by_admission_type(df: pd.DataFrame) -> pd.DataFrame:
    # unrounded in SQL terms: AVG over integer days carries 4 decimals
    out = mean_by(df, ["admission_type"], stay_days(df), "avg_stay_days", 4)
    return sort_desc(out, "avg_stay_days")
