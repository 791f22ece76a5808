"""
SKU management view.

Holds every SKU fetched from the API and does search, paging, create and
delete on the client side:
- the list is fetched wholesale and refetched after every successful change
- search is a case-insensitive substring match on the label
- pages are fixed size slices of the filtered list
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple
import math
import logging

from retail_planner.core.config import get_settings
from retail_planner.dashboard.client import ApiError, PlanningApiClient
from retail_planner.dashboard.notifications import Notifier
from retail_planner.dashboard.pagination import filter_by_label, page_count, paginate
from retail_planner.schemas.sku import Sku, SkuCreate

logger = logging.getLogger(__name__)

SKU_FORM_FIELDS = ("id", "label", "class", "department", "price", "cost")


class SkuFormError(ValueError):
    """The add-SKU form failed validation. `errors` maps field to message."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__(", ".join(errors.values()))
        self.errors = errors


def validate_sku_form(form: Mapping[str, Any]) -> SkuCreate:
    """
    Check that every field is filled in and turn the form into a SkuCreate.

    price and cost are coerced to float and must be finite.
    """
    errors: Dict[str, str] = {}
    for field in SKU_FORM_FIELDS:
        value = form.get(field)
        if value is None or str(value).strip() == "":
            errors[field] = f"{field} is required"

    numbers: Dict[str, float] = {}
    for field in ("price", "cost"):
        if field in errors:
            continue
        try:
            number = float(form[field])
        except (TypeError, ValueError):
            number = math.nan
        if not math.isfinite(number):
            errors[field] = f"{field} must be a number"
            continue
        numbers[field] = number

    if errors:
        raise SkuFormError(errors)

    return SkuCreate(
        id=str(form["id"]).strip(),
        label=str(form["label"]).strip(),
        sku_class=str(form["class"]).strip(),
        department=str(form["department"]).strip(),
        price=numbers["price"],
        cost=numbers["cost"],
    )


class SkuDirectory:
    def __init__(self, api: PlanningApiClient, notifier: Notifier, page_size: Optional[int] = None):
        self._api = api
        self._notifier = notifier
        self.page_size = page_size or get_settings().SKU_PAGE_SIZE
        self.skus: List[Sku] = []
        self.loading = False
        self.query = ""
        self.current_page = 1
        self.form_errors: Dict[str, str] = {}

    async def load(self) -> None:
        """Fetch all SKUs and replace the local list."""
        self.loading = True
        try:
            self.skus = await self._api.fetch_skus()
        except ApiError as e:
            logger.error(f"Error fetching SKUs: {e}")
            self._notifier.error("Failed to load SKUs")
        finally:
            self.loading = False
        # A delete can leave us past the last page
        self.current_page = min(self.current_page, max(1, self.total_pages))

    def search(self, query: str) -> None:
        self.query = query
        self.current_page = 1

    @property
    def filtered(self) -> List[Sku]:
        return filter_by_label(self.skus, self.query)

    @property
    def total_pages(self) -> int:
        # Counted on the filtered list so it agrees with the page slices
        return page_count(len(self.filtered), self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def go_to_page(self, page: int) -> int:
        self.current_page = min(max(1, page), max(1, self.total_pages))
        return self.current_page

    def next_page(self) -> int:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> int:
        return self.go_to_page(self.current_page - 1)

    @property
    def page_items(self) -> List[Sku]:
        return paginate(self.filtered, self.current_page, self.page_size)

    def rows(self) -> List[Tuple[int, Sku]]:
        """Page items with their running row number."""
        offset = (self.current_page - 1) * self.page_size
        return [(offset + index + 1, sku) for index, sku in enumerate(self.page_items)]

    async def create(self, form: Mapping[str, Any]) -> bool:
        """
        Validate the form, post the new SKU and refetch the list.

        Returns True when the SKU was added. Validation failures are left in
        `form_errors` and send no request.
        """
        self.form_errors = {}
        try:
            sku = validate_sku_form(form)
        except SkuFormError as e:
            self.form_errors = e.errors
            return False

        try:
            await self._api.create_sku(sku)
        except ApiError as e:
            logger.error(f"Error adding SKU {sku.id}: {e}")
            self._notifier.error("Failed to add SKU")
            return False

        self._notifier.success("SKU added successfully")
        await self.load()
        return True

    async def delete(self, sku_id: str) -> bool:
        try:
            await self._api.delete_sku(sku_id)
        except ApiError as e:
            logger.error(f"Error deleting SKU {sku_id}: {e}")
            self._notifier.error("Failed to delete SKU")
            return False

        await self.load()
        self._notifier.success("SKU deleted successfully")
        return True
