"""
Test results & medication analysis.
"""

from __future__ import annotations
import pandas as pd
from healthcare_analytics.reports.base import count_by, sort_desc, with_percentage

def result_distribution(df: pd.DataFrame) -> pd.DataFrame:
    out = count_by(df, ["test_results"], "result_count")
    return sort_desc(with_percentage(out, "result_count", len(df)), "result_count")

def result_by_medication(df: pd.DataFrame) -> pd.DataFrame:
    """Outcome counts per medication, most frequent medication first within each outcome."""
    out = count_by(df, ["test_results", "medication"], "count")
    return out.sort_values(["test_results", "count"], ascending=[True, False], kind="mergesort").reset_index(drop=True)
