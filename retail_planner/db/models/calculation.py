from sqlalchemy import Column, String, Text

from retail_planner.db.base import Base


class Calculation(Base):
    """Derived financial metrics per (store, sku, week), loaded upstream.

    Metric columns are stored as text exactly as delivered and are never
    parsed or recomputed here.
    """
    __tablename__ = "calculations"

    store_id = Column(String(64), primary_key=True)
    sku_id = Column(String(64), primary_key=True)
    week = Column(String(16), primary_key=True)
    sales_units = Column(Text, nullable=True)
    sales_dollars = Column(Text, nullable=True)
    cost_dollars = Column(Text, nullable=True)
    gm_dollars = Column(Text, nullable=True)
    gm_percent = Column(Text, nullable=True)
