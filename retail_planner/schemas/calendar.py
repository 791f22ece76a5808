from retail_planner.schemas.base import CamelModel


class CalendarWeek(CamelModel):
    id: int
    week: str
    week_label: str
    month: str
    month_label: str
