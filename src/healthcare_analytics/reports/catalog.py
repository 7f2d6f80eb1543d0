"""
Catalog of the exploratory reports, grouped by section.
"""

from __future__ import annotations
import logging
from typing import Callable, Iterator, NamedTuple
import pandas as pd
from healthcare_analytics.reports import admissions, demographics, doctors, financials, outcomes

log = logging.getLogger(__name__)

class Report(NamedTuple):
    section: str
    title: str
    func: Callable[[pd.DataFrame], pd.DataFrame]

SECTIONS = {
    "demographics": "Patient Demographics & Medical Trends",
    "admissions": "Hospital & Admission Insights",
    "financials": "Financial Analysis",
    "doctors": "Doctor Performance & Treatment Analysis",
    "test_results": "Test Results & Medication Analysis",
}

REPORTS: dict[str, Report] = {
    "gender_age_groups":             Report("demographics", "Patients by Gender and Age Group", demographics.gender_age_groups),
    "top_medical_conditions":        Report("demographics", "Most Common Medical Conditions", demographics.top_medical_conditions),
    "blood_type_distribution":       Report("demographics", "Distribution of Blood Types", demographics.blood_type_distribution),
    "admissions_per_hospital":       Report("admissions", "Admissions per Hospital", admissions.admissions_per_hospital),
    "monthly_admissions":            Report("admissions", "Monthly Admission Trend", admissions.monthly_admissions),
    "avg_stay_by_admission_type":    Report("admissions", "Average Stay by Admission Type", admissions.avg_stay_by_admission_type),
    "avg_billing_by_admission_type": Report("financials", "Average Billing per Admission Type", financials.avg_billing_by_admission_type),
    "revenue_by_hospital_insurer":   Report("financials", "Revenue by Hospital and Insurance Provider", financials.revenue_by_hospital_insurer),
    "admission_type_costs":          Report("financials", "Emergency vs Urgent vs Elective Costs", financials.admission_type_costs),
    "patients_per_doctor":           Report("doctors", "Patients Treated per Doctor", doctors.patients_per_doctor),
    "avg_stay_per_doctor":           Report("doctors", "Average Stay per Doctor", doctors.avg_stay_per_doctor),
    "top_medications":               Report("doctors", "Most Prescribed Medications", doctors.top_medications),
    "test_result_distribution":      Report("test_results", "Distribution of Test Results", outcomes.result_distribution),
    "test_result_by_medication":     Report("test_results", "Test Results by Medication", outcomes.result_by_medication),
}

def run_report(name: str, df: pd.DataFrame) -> pd.DataFrame:
    try:
        report = REPORTS[name]
    except KeyError:
        raise KeyError(f"Unknown report {name!r}; expected one of {sorted(REPORTS)}") from None
    out = report.func(df)
    log.debug("Report %s: %d rows", name, len(out))
    return out

def run_all(df: pd.DataFrame, section: str | None = None) -> dict[str, pd.DataFrame]:
    if section is not None and section not in SECTIONS:
        raise ValueError(f"Unknown section {section!r}; expected one of {list(SECTIONS)}")
    results = {
        name: run_report(name, df)
        for name, report in REPORTS.items()
        if section is None or report.section == section
    }
    log.info("Ran %d reports over %d records", len(results), len(df))
    return results

def iter_rows(report: pd.DataFrame) -> Iterator[tuple]:
    """Yield report rows lazily as named tuples."""
    yield from report.itertuples(index=False, name="Row")
