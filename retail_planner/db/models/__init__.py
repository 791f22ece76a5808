from .store import Store
from .sku import Sku
from .calendar import Calendar
from .planning import Planning
from .calculation import Calculation
from .chart import Chart

__all__ = [
    'Store',
    'Sku',
    'Calendar',
    'Planning',
    'Calculation',
    'Chart'
]
