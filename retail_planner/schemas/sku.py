from pydantic import ConfigDict, Field

from retail_planner.schemas.base import CamelModel


class SkuBase(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    label: str = Field(..., min_length=1)
    sku_class: str = Field(..., min_length=1, alias="class")
    department: str = Field(..., min_length=1)
    # Form input arrives as text, pydantic coerces it to float
    price: float = Field(..., allow_inf_nan=False)
    cost: float = Field(..., allow_inf_nan=False)


class SkuCreate(SkuBase):
    id: str = Field(..., min_length=1)


class Sku(SkuBase):
    id: str
