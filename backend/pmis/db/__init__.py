"""Database Infrastructure — SQLAlchemy declarative base for the sql backend."""
