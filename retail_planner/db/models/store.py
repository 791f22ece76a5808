from sqlalchemy import Column, String

from retail_planner.db.base import Base


class Store(Base):
    __tablename__ = "stores"

    id = Column(String(64), primary_key=True)
    label = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    state = Column(String(64), nullable=False)
