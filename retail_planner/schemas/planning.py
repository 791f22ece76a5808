from typing import Optional

from retail_planner.schemas.base import CamelModel


class PlanningRow(CamelModel):
    store_id: str
    sku_id: str
    week: str
    sales_units: int


class CalculationRow(CamelModel):
    """Metrics are passed through as the text stored upstream."""
    store_id: str
    sku_id: str
    week: str
    sales_units: Optional[str] = None
    sales_dollars: Optional[str] = None
    cost_dollars: Optional[str] = None
    gm_dollars: Optional[str] = None
    gm_percent: Optional[str] = None


class ChartPoint(CamelModel):
    week: str
    gm_dollars: Optional[float] = None
    sales_dollars: Optional[float] = None
    gm_percent: Optional[float] = None
