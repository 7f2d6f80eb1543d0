"""
Shared building blocks for the aggregate reports.

Grouping keeps null keys as their own group. Groups come out sorted by key,
and every later sort is stable, so ties always fall back to key order.
"""

from __future__ import annotations
import pandas as pd

AGE_GROUPS = ["Under 20", "20-39", "40-59", "60+"]

def count_by(df: pd.DataFrame, keys: list[str], name: str) -> pd.DataFrame:
    return df.groupby(keys, dropna=False).size().reset_index(name=name)

def sort_desc(df: pd.DataFrame, col: str, limit: int | None = None) -> pd.DataFrame:
    out = df.sort_values(col, ascending=False, kind="mergesort").reset_index(drop=True)
    return out.head(limit) if limit is not None else out

def with_percentage(df: pd.DataFrame, count_col: str, total: int) -> pd.DataFrame:
    """Share of `total` rows per group, in percent, rounded to 2 decimals."""
    df = df.copy()
    df["percentage"] = (df[count_col] * 100.0 / total).round(2) if total else 0.0
    return df

def age_group(age: pd.Series) -> pd.Series:
    age = pd.to_numeric(age, errors="coerce").astype(float)
    groups = pd.Series([None] * len(age), index=age.index, dtype="object")
    groups[age < 20] = "Under 20"
    groups[age.between(20, 39)] = "20-39"
    groups[age.between(40, 59)] = "40-59"
    groups[age >= 60] = "60+"
    return groups

def stay_days(df: pd.DataFrame) -> pd.Series:
    """Calendar days from admission to discharge; negative when the dates are swapped."""
    admit = pd.to_datetime(df["date_of_admission"], errors="coerce").dt.normalize()
    discharge = pd.to_datetime(df["discharge_date"], errors="coerce").dt.normalize()
    return (discharge - admit).dt.days

def mean_by(df: pd.DataFrame, keys: list[str], values: pd.Series, name: str, decimals: int) -> pd.DataFrame:
    frame = df[keys].copy()
    frame[name] = values
    return frame.groupby(keys, dropna=False)[name].mean().round(decimals).reset_index()
