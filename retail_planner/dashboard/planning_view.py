import asyncio
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Union
import logging

from retail_planner.dashboard.client import ApiError, PlanningApiClient
from retail_planner.dashboard.selection import StoreSelection

logger = logging.getLogger(__name__)


class PlanningState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


class PlanningView:
    """
    Planning rows for the selected store.

    Every change of the selected store starts a new fetch. Each fetch carries
    a sequence number and its result is applied only while that number is
    still the latest, so a slow answer for an earlier store never replaces
    the rows of the current one. Superseded requests are not cancelled.
    """

    PLACEHOLDER = "Select a store"

    def __init__(self, api: PlanningApiClient, selection: StoreSelection):
        self._api = api
        self._selection = selection
        self.state = PlanningState.IDLE
        self.store_id: Optional[str] = None
        self.rows: List[Dict[str, Any]] = []
        self.error: Optional[str] = None
        self._request_seq = 0
        self._tasks: Set[asyncio.Task] = set()
        self._unsubscribe = selection.subscribe(self._on_store_changed)

    def _on_store_changed(self, store_id: Optional[str]) -> None:
        # Fails before any state changes when called outside an event loop
        loop = asyncio.get_running_loop() if store_id else None

        self._request_seq += 1
        self.store_id = store_id
        self.rows = []
        self.error = None

        if not store_id:
            self.state = PlanningState.IDLE
            return

        self.state = PlanningState.LOADING
        task = loop.create_task(self._fetch(store_id, self._request_seq))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _fetch(self, store_id: str, seq: int) -> None:
        try:
            rows = await self._api.fetch_planning(store_id)
        except ApiError as e:
            if seq != self._request_seq:
                logger.debug(f"Ignoring failed stale planning request for store {store_id}")
                return
            logger.error(f"Error fetching planning data for store {store_id}: {e}")
            self.state = PlanningState.ERRORED
            self.error = str(e)
            return

        if seq != self._request_seq:
            logger.debug(f"Ignoring stale planning response for store {store_id}")
            return
        self.rows = rows
        self.state = PlanningState.LOADED

    async def refresh(self) -> None:
        """Refetch rows for the current store and wait for them."""
        if not self.store_id:
            return
        self._request_seq += 1
        self.state = PlanningState.LOADING
        await self._fetch(self.store_id, self._request_seq)

    async def settle(self) -> None:
        """Wait until every in-flight fetch has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def render(self) -> Union[str, List[Dict[str, Any]]]:
        if not self.store_id:
            return self.PLACEHOLDER
        return self.rows

    def close(self) -> None:
        self._unsubscribe()
