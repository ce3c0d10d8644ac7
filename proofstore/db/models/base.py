"""
Shared SQLAlchemy base and helpers.
"""
from datetime import datetime, UTC

from sqlalchemy.orm import declarative_base


def now_utc():
    """Return an aware UTC datetime for submission timestamps."""
    return datetime.now(UTC)


Base = declarative_base()
