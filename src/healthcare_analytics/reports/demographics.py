"""
Patient demographics & medical trends.
"""

from __future__ import annotations
import pandas as pd
from healthcare_analytics.reports.base import AGE_GROUPS, age_group, count_by, sort_desc, with_percentage

AGE_GROUP_RANK = {g: i for i, g in enumerate(AGE_GROUPS)}

def _age_group_order(col: pd.Series) -> pd.Series:
    return col.map(AGE_GROUP_RANK) if col.name == "age_group" else col

def gender_age_groups(df: pd.DataFrame) -> pd.DataFrame:
    """Patients by gender and age bracket."""
    frame = df[["gender"]].assign(age_group=age_group(df["age"]))
    out = count_by(frame, ["gender", "age_group"], "patient_count")
    # nulls first, as SQL ORDER BY does
    out = out.sort_values(["gender", "age_group"], key=_age_group_order, kind="mergesort", na_position="first")
    return out.reset_index(drop=True)

def top_medical_conditions(df: pd.DataFrame, limit: int = 5) -> pd.DataFrame:
    return sort_desc(count_by(df, ["medical_condition"], "condition_count"), "condition_count", limit)

def blood_type_distribution(df: pd.DataFrame) -> pd.DataFrame:
    out = count_by(df, ["blood_type"], "blood_type_count")
    return sort_desc(with_percentage(out, "blood_type_count", len(df)), "blood_type_count")
