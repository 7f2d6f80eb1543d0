"""
Financial analysis: billing and revenue patterns.
"""

from __future__ import annotations
import pandas as pd
from healthcare_analytics.reports.base import mean_by, sort_desc

ADMISSION_TYPES = ["Emergency", "Urgent", "Elective"]

def avg_billing_by_admission_type(df: pd.DataFrame) -> pd.DataFrame:
    out = mean_by(df, ["admission_type"], df["billing_amount"], "avg_billing", 2)
    return sort_desc(out, "avg_billing")

def revenue_by_hospital_insurer(df: pd.DataFrame) -> pd.DataFrame:
    out = (
        df.groupby(["hospital", "insurance_provider"], dropna=False)["billing_amount"]
          .sum()
          .round(2)
          .reset_index(name="total_revenue")
    )
    return sort_desc(out, "total_revenue")

def admission_type_costs(df: pd.DataFrame) -> pd.DataFrame:
    """Average billing for the three known admission types only."""
    known = df[df["admission_type"].isin(ADMISSION_TYPES)]
    return mean_by(known, ["admission_type"], known["billing_amount"], "avg_billing", 2)
