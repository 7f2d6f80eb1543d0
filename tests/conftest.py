"""
Shared fixtures: in-memory record frames and a throwaway SQLite database.
"""
import pandas as pd
import pytest
from healthcare_analytics.core.db import create_tables, get_engine
from healthcare_analytics.models import BUSINESS_FIELDS

BASE_RECORD = {
    "name": "Bobby Jackson",
    "age": 30,
    "gender": "Male",
    "blood_type": "B-",
    "medical_condition": "Cancer",
    "date_of_admission": "2024-01-31",
    "doctor": "Matthew Smith",
    "hospital": "Sons and Miller",
    "insurance_provider": "Blue Cross",
    "billing_amount": 18856.28,
    "room_number": 328,
    "admission_type": "Urgent",
    "discharge_date": "2024-02-02",
    "medication": "Paracetamol",
    "test_results": "Normal",
}

def make_records(*overrides: dict) -> pd.DataFrame:
    """One row per override dict, each on top of BASE_RECORD."""
    rows = [{**BASE_RECORD, **o} for o in overrides]
    df = pd.DataFrame(rows, columns=BUSINESS_FIELDS)
    df["age"] = df["age"].astype("Int64")
    df["room_number"] = df["room_number"].astype("Int64")
    df["billing_amount"] = df["billing_amount"].astype(float)
    for col in ("date_of_admission", "discharge_date"):
        df[col] = pd.to_datetime(df[col])
    df["data_issue"] = None
    return df

@pytest.fixture
def records():
    return make_records(
        {"name": "Ann Lee", "age": 15, "gender": "female", "blood_type": "A+",
         "medical_condition": "ASTHMA", "doctor": "dr. JOHN smith", "billing_amount": -500.0,
         "admission_type": "Emergency", "medication": "Aspirin", "test_results": "Abnormal"},
        {"name": None, "age": 45, "gender": "MALE", "blood_type": "O-",
         "medical_condition": "diabetes", "doctor": "Jane doe", "billing_amount": 1200.5,
         "admission_type": "Elective", "medication": "Ibuprofen", "test_results": "Normal"},
        {"name": "Carl Diaz", "age": None, "gender": "Other", "blood_type": "A+",
         "medical_condition": "Diabetes", "doctor": "JANE DOE", "billing_amount": 800.0,
         "admission_type": "Urgent", "medication": "Aspirin", "test_results": "Inconclusive",
         "date_of_admission": "2024-03-10", "discharge_date": "2024-03-20"},
        {"name": "Dana Kim", "age": 72, "gender": "Female", "blood_type": "AB+",
         "medical_condition": "Asthma", "doctor": "Jane Doe", "billing_amount": 300.0,
         "admission_type": "Emergency", "medication": "Lipitor", "test_results": "Normal",
         "date_of_admission": "2024-03-01", "discharge_date": "2024-03-04"},
    )

@pytest.fixture
def engine(tmp_path):
    engine = get_engine(f"sqlite:///{tmp_path / 'test.db'}")
    create_tables(engine)
    yield engine
    engine.dispose()

@pytest.fixture
def raw_csv(tmp_path):
    """Raw export with the dataset's spaced headers and messy values."""
    path = tmp_path / "healthcare_dataset.csv"
    path.write_text(
        "Name,Age,Gender,Blood Type,Medical Condition,Date of Admission,Doctor,Hospital,"
        "Insurance Provider,Billing Amount,Room Number,Admission Type,Discharge Date,Medication,Test Results\n"
        "Bobby Jackson,30,MALE,B-,cancer,2024-01-31,Matthew Smith,Sons and Miller,Blue Cross,-18856.28,328,Urgent,2024-02-02,Paracetamol,Normal\n"
        "Bobby Jackson,30,MALE,B-,cancer,2024-01-31,Matthew Smith,Sons and Miller,Blue Cross,-18856.28,328,Urgent,2024-02-02,Paracetamol,Normal\n"
        ",62,female,A+,Obesity,2019-08-20,samantha davies,Kim Inc,Medicare,33643.33,265,Emergency,2019-08-26,Ibuprofen,Inconclusive\n"
        "Andrew Watts,NA,Female,A-,Obesity,2022-09-22,tiffany mitchell,Cook PLC,Aetna,27955.10,205,Elective,2022-10-07,Aspirin,Normal\n"
        " Adrienne Bell ,43,Female,AB+,Cancer,2022-09-19,Kathleen Hanna,White-White,Aetna,37909.78,450,Urgent,2022-10-09,Penicillin,Abnormal\n",
        encoding="utf-8",
    )
    return path
