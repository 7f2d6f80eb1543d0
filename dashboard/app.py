"""
Healthcare Analytics Dashboard
Interactive view of data quality and the exploratory reports
"""
import streamlit as st
import pandas as pd
import plotly.express as px
from pathlib import Path
from healthcare_analytics.core.config import DUPLICATES_LOG, MISSING_LOG
from healthcare_analytics.core.db import get_engine
from healthcare_analytics.load.load_to_db import fetch_records
from healthcare_analytics.reports.catalog import REPORTS, SECTIONS, run_all
from healthcare_analytics.transforms.cleaning import MISSING_VALUE

st.set_page_config(page_title="Healthcare Analytics", layout="wide")

@st.cache_resource
def get_connection():
    try:
        return get_engine()
    except Exception as e:
        st.error(f"Cannot connect to database: {e}")
        return None

@st.cache_data(ttl=60)
def load_records(_engine):
    return fetch_records(_engine)

@st.cache_data(ttl=60)
def load_log(filepath):
    if Path(filepath).exists():
        return pd.read_csv(filepath)
    return pd.DataFrame()

# charts per report; anything not listed is shown as a table only
CHARTS = {
    "gender_age_groups": lambda d: px.bar(d, x="age_group", y="patient_count", color="gender", barmode="group"),
    "top_medical_conditions": lambda d: px.bar(d, x="medical_condition", y="condition_count"),
    "blood_type_distribution": lambda d: px.pie(d, values="blood_type_count", names="blood_type", hole=0.4),
    "admissions_per_hospital": lambda d: px.bar(d.head(20), x="hospital", y="admission_count"),
    "monthly_admissions": lambda d: px.line(
        d.dropna().assign(month=lambda m: m["admission_year"].astype(str) + "-"
                          + m["admission_month"].astype(str).str.zfill(2)),
        x="month", y="monthly_admissions", markers=True),
    "avg_stay_by_admission_type": lambda d: px.bar(d, x="admission_type", y="avg_stay_days"),
    "avg_billing_by_admission_type": lambda d: px.bar(d, x="admission_type", y="avg_billing"),
    "patients_per_doctor": lambda d: px.bar(d, x="doctor", y="patient_count"),
    "top_medications": lambda d: px.bar(d, x="medication", y="prescription_count"),
    "test_result_distribution": lambda d: px.pie(d, values="result_count", names="test_results", hole=0.4),
    "test_result_by_medication": lambda d: px.bar(d, x="medication", y="count", color="test_results", barmode="group"),
}

st.title("Healthcare Analytics Dashboard")
st.markdown("Data quality of the admissions table and the exploratory reports")
st.markdown("---")

engine = get_connection()
if not engine:
    st.stop()

records = load_records(engine)
if records.empty:
    st.info("No records loaded. Run the pipeline first.")
    st.stop()

duplicates_log = load_log(DUPLICATES_LOG)
missing_log = load_log(MISSING_LOG)

# Summary metrics
st.subheader("Data Summary")
col1, col2, col3, col4 = st.columns(4)

flagged = int(records["data_issue"].eq(MISSING_VALUE).sum())
col1.metric("Records", len(records))
col1.caption("Admission events in the database")

col2.metric("Duplicate Groups", len(duplicates_log))
col2.caption("Reported, not removed")

col3.metric("Flagged Records", flagged)
col3.caption("Missing name, age or gender")

complete_pct = (1 - flagged / len(records)) * 100
col4.metric("Completeness", f"{complete_pct:.1f}%")
col4.caption("Records without a data issue marker")

with st.expander("Data quality details"):
    if not duplicates_log.empty:
        st.warning(f"{len(duplicates_log)} groups of identical records")
        st.dataframe(duplicates_log, use_container_width=True, height=250)
    else:
        st.success("No duplicate records found.")
    if not missing_log.empty:
        st.warning(f"{len(missing_log)} records with missing values")
        st.dataframe(missing_log, use_container_width=True, height=250)

st.markdown("---")

tabs = st.tabs(list(SECTIONS.values()))
for tab, section in zip(tabs, SECTIONS):
    with tab:
        for name, out in run_all(records, section).items():
            st.markdown(f"**{REPORTS[name].title}**")
            col1, col2 = st.columns([2, 1])
            with col1:
                if name in CHARTS and not out.empty:
                    fig = CHARTS[name](out)
                    fig.update_layout(height=320)
                    st.plotly_chart(fig, use_container_width=True)
            with col2:
                st.dataframe(out, use_container_width=True, height=320)

st.markdown("---")
st.caption("Healthcare Analytics Pipeline - Reports Dashboard")
st.caption("Last updated: Re-run the pipeline to refresh data")
