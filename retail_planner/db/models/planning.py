from sqlalchemy import Column, Integer, String

from retail_planner.db.base import Base


class Planning(Base):
    """Sales units planned for a SKU in a store for one week.

    store_id and sku_id reference stores/skus by value only. There is no
    foreign key, so deleting a store or SKU leaves its planning rows behind.
    """
    __tablename__ = "planning"

    store_id = Column(String(64), primary_key=True)
    sku_id = Column(String(64), primary_key=True)
    week = Column(String(16), primary_key=True)
    sales_units = Column(Integer, nullable=False, default=0)
