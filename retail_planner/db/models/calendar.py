from sqlalchemy import Column, Integer, String

from retail_planner.db.base import Base


class Calendar(Base):
    """Time dimension: one row per fiscal week."""
    __tablename__ = "calendar"

    id = Column(Integer, primary_key=True, autoincrement=False)
    week = Column(String(16), nullable=False, unique=True)
    week_label = Column(String(64), nullable=False)
    month = Column(String(16), nullable=False)
    month_label = Column(String(64), nullable=False)
