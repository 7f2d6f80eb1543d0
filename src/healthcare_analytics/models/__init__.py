from healthcare_analytics.models.tables import (
    Base,
    HealthcareRecord,
    BUSINESS_FIELDS,
    RECORD_COLUMNS,
    DATE_COLUMNS,
)
from healthcare_analytics.models.record_store import RecordStore
