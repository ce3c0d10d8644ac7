"""
SQLAlchemy models for the proof store.

Exposes `Base`, `now_utc`, and the ORM classes.
"""

from .base import Base, now_utc  # re-export

from .proofs import Proof
from .admins import Admin

__all__ = [
    "Base",
    "now_utc",
    "Proof",
    "Admin",
]
