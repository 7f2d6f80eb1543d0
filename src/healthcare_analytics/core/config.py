
from pathlib import Path
import os
from dotenv import load_dotenv

load_dotenv()

# project paths
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent
DATA_DIR    = BASE_DIR / "data"
RAW_DIR     = DATA_DIR / "raw"
CLEAN_DIR   = DATA_DIR / "cleaned"
LOGS_DIR    = DATA_DIR / "logs"
REPORTS_DIR = DATA_DIR / "reports"

# input files
RAW_FILE = RAW_DIR / "healthcare_dataset.csv"

# output files
RECORDS_CLEAN = CLEAN_DIR / "healthcare_clean.csv"

# logs
DUPLICATES_LOG = LOGS_DIR / "duplicates_logs.csv"
MISSING_LOG    = LOGS_DIR / "missing_values_logs.csv"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Database
DB_USER = os.getenv("DB_USER")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5433")
DB_NAME = os.getenv("DB_NAME")

if os.getenv("DATABASE_URL"):
    DATABASE_URL = os.getenv("DATABASE_URL")
elif all([DB_USER, DB_PASSWORD, DB_NAME]):
    DATABASE_URL = f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
else:
    # local fallback when no server is configured
    DATABASE_URL = f"sqlite:///{DATA_DIR / 'healthcare.db'}"
