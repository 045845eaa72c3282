# File: app/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Every table the portal owns (currently just `users`) inherits from this.
    """
    pass
