"""
CLI wrapper for the healthcare cleaning + reporting pipeline.
Run with:
    python -m healthcare_analytics.scripts.run_pipeline [path/to/healthcare_dataset.csv]
"""
import logging
import sys
from healthcare_analytics.core.config import RAW_FILE
from healthcare_analytics.core.logging_setup import setup_logging
from healthcare_analytics.services.pipeline import run_pipeline

def main(argv=None) -> int:
    setup_logging()
    log = logging.getLogger(__name__)
    argv = sys.argv[1:] if argv is None else argv
    source = argv[0] if argv else RAW_FILE

    log.info("Starting Healthcare Analytics Pipeline (source: %s)", source)
    try:
        run_pipeline(source)
    except Exception:
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
