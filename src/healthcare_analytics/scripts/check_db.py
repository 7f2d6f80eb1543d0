"""
Check the database connection and the quality markers of the loaded records.
Run with: python -m healthcare_analytics.scripts.check_db
"""
import sys
from sqlalchemy import func, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from healthcare_analytics.core.db import get_engine
from healthcare_analytics.models import HealthcareRecord

def record_summary(engine: Engine) -> dict:
    """Row count plus how many rows break the cleaning invariants."""
    rec = HealthcareRecord
    stmt = select(
        func.count().label("records"),
        func.count(rec.data_issue).label("flagged"),
        func.count().filter(
            (rec.name.is_(None) | rec.age.is_(None) | rec.gender.is_(None)) & rec.data_issue.is_(None)
        ).label("unflagged_missing"),
        func.count().filter(rec.billing_amount < 0).label("negative_billing"),
        func.count().filter(rec.discharge_date < rec.date_of_admission).label("discharge_before_admission"),
    )
    with engine.connect() as conn:
        return dict(conn.execute(stmt).mappings().one())

def main() -> int:
    try:
        engine = get_engine()
        print("Database Connection: SUCCESS\n")

        if HealthcareRecord.__tablename__ not in inspect(engine).get_table_names():
            print("  No records table found. Run the pipeline first.")
            return 1

        summary = record_summary(engine)
        print(f"{HealthcareRecord.__tablename__}:")
        for key, value in summary.items():
            print(f"  - {key.replace('_', ' ')}: {value}")

        ok = summary["unflagged_missing"] == 0 and summary["negative_billing"] == 0
        print("\nCleaning invariants:", "OK" if ok else "VIOLATED")
        return 0 if ok else 1

    except SQLAlchemyError as e:
        print("Database Connection: FAILED")
        print(f"Error: {e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
