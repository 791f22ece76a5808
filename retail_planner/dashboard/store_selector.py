from typing import List, Optional
import logging

from retail_planner.dashboard.client import ApiError, PlanningApiClient
from retail_planner.dashboard.selection import StoreSelection
from retail_planner.schemas.store import Store

logger = logging.getLogger(__name__)


class UnknownStoreError(ValueError):
    pass


class StoreSelector:
    """Searchable single-select over all stores.

    The chosen id is published into the shared StoreSelection.
    """

    PLACEHOLDER = "Select store..."
    EMPTY_MESSAGE = "No store found."

    def __init__(self, api: PlanningApiClient, selection: StoreSelection):
        self._api = api
        self._selection = selection
        self.stores: List[Store] = []
        self.loading = False
        self.query = ""

    async def load(self) -> None:
        self.loading = True
        try:
            self.stores = await self._api.fetch_stores()
        except ApiError as e:
            logger.error(f"Error fetching stores: {e}")
        finally:
            self.loading = False

    def search(self, query: str) -> None:
        self.query = query

    @property
    def options(self) -> List[Store]:
        needle = self.query.lower()
        return [
            store for store in self.stores
            if needle in store.label.lower() or needle in store.id.lower()
        ]

    @property
    def empty_message(self) -> Optional[str]:
        return None if self.options else self.EMPTY_MESSAGE

    def select(self, store_id: str) -> Optional[str]:
        """Select a store; picking the current one again clears the selection."""
        if not any(store.id == store_id for store in self.stores):
            raise UnknownStoreError(f"Unknown store: {store_id}")

        new_value = None if store_id == self._selection.store_id else store_id
        logger.debug(f"Selected store id: {new_value}")
        self._selection.set(new_value)
        self.query = ""
        return new_value

    @property
    def selected_store(self) -> Optional[Store]:
        store_id = self._selection.store_id
        return next((store for store in self.stores if store.id == store_id), None)

    @property
    def display_label(self) -> str:
        store = self.selected_store
        return store.label if store else self.PLACEHOLDER
