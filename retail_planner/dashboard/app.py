from typing import Optional

from retail_planner.dashboard.client import PlanningApiClient
from retail_planner.dashboard.notifications import Notifier
from retail_planner.dashboard.planning_view import PlanningView
from retail_planner.dashboard.selection import StoreSelection
from retail_planner.dashboard.sku_directory import SkuDirectory
from retail_planner.dashboard.store_selector import StoreSelector


class Dashboard:
    """Wires the views to one API client, toast channel and store selection."""

    def __init__(self, api: Optional[PlanningApiClient] = None):
        self.api = api or PlanningApiClient()
        self.notifier = Notifier()
        self.selection = StoreSelection()
        self.skus = SkuDirectory(self.api, self.notifier)
        self.store_selector = StoreSelector(self.api, self.selection)
        self.planning = PlanningView(self.api, self.selection)

    async def mount(self) -> None:
        await self.store_selector.load()
        await self.skus.load()

    async def close(self) -> None:
        self.planning.close()
        await self.planning.settle()
        await self.api.aclose()
