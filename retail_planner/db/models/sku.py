from sqlalchemy import Column, Float, String

from retail_planner.db.base import Base


class Sku(Base):
    __tablename__ = "skus"

    id = Column(String(64), primary_key=True)
    label = Column(String(255), nullable=False, index=True)
    # "class" is reserved in Python, the column keeps its schema name
    sku_class = Column("class", String(255), nullable=False)
    department = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)
    cost = Column(Float, nullable=False)
