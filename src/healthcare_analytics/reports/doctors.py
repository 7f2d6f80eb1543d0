"""
Doctor performance & treatment analysis.
"""

from __future__ import annotations
import pandas as pd
from healthcare_analytics.reports.base import count_by, mean_by, sort_desc, stay_days

def patients_per_doctor(df: pd.DataFrame, limit: int = 10) -> pd.DataFrame:
    return sort_desc(count_by(df, ["doctor"], "patient_count"), "patient_count", limit)

def avg_stay_per_doctor(df: pd.DataFrame) -> pd.DataFrame:
    return sort_desc(mean_by(df, ["doctor"], stay_days(df), "avg_stay_days", 2), "avg_stay_days")

def top_medications(df: pd.DataFrame, limit: int = 5) -> pd.DataFrame:
    return sort_desc(count_by(df, ["medication"], "prescription_count"), "prescription_count", limit)
