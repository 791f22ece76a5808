from sqlalchemy import Column, Float, String

from retail_planner.db.base import Base


class Chart(Base):
    __tablename__ = "charts"

    week = Column(String(16), primary_key=True)
    gm_dollars = Column(Float, nullable=True)
    sales_dollars = Column(Float, nullable=True)
    gm_percent = Column(Float, nullable=True)
