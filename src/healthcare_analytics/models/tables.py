"""
ORM model for the healthcare admissions table.
"""

from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import Column, String, Date, Integer, Numeric

class Base(DeclarativeBase):
    pass

class HealthcareRecord(Base):
    """One patient admission event."""
    __tablename__ = "healthcare_records"

    id                 = Column(Integer, primary_key=True, autoincrement=True)
    name               = Column(String(100))
    age                = Column(Integer)
    gender             = Column(String(10))
    blood_type         = Column(String(5))
    medical_condition  = Column(String(50))
    date_of_admission  = Column(Date)
    doctor             = Column(String(100))
    hospital           = Column(String(100))
    insurance_provider = Column(String(50))
    billing_amount     = Column(Numeric(15, 2, asdecimal=False))
    room_number        = Column(Integer)
    admission_type     = Column(String(20))
    discharge_date     = Column(Date)
    medication         = Column(String(50))
    test_results       = Column(String(20))
    data_issue         = Column(String(50))

# the fifteen source fields; data_issue is added by cleaning
BUSINESS_FIELDS = [
    "name", "age", "gender", "blood_type", "medical_condition",
    "date_of_admission", "doctor", "hospital", "insurance_provider",
    "billing_amount", "room_number", "admission_type", "discharge_date",
    "medication", "test_results",
]
RECORD_COLUMNS = BUSINESS_FIELDS + ["data_issue"]
DATE_COLUMNS = ["date_of_admission", "discharge_date"]
