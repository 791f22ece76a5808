from pydantic import Field

from retail_planner.schemas.base import CamelModel

# Base model for common attributes
class StoreBase(CamelModel):
    label: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)

# Model for creating a new store (input)
class StoreCreate(StoreBase):
    id: str = Field(..., min_length=1)

# Model for reading store data (output)
class Store(StoreBase):
    id: str
