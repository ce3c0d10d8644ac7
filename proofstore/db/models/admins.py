from sqlalchemy import Column, String

from .base import Base


class Admin(Base):
    """One identity in the admin allow-list."""
    __tablename__ = 'admins'
    email = Column(String, primary_key=True)
