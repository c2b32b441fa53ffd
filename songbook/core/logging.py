# ============================================================================
# FILE: songbook/core/logging.py
# ============================================================================
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logging(level: str = "INFO"):
    """Configure root logging once for the whole process"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    # SQL echo is too chatty outside of debugging
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
