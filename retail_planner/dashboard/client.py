from typing import Any, Dict, List, Optional
from urllib.parse import quote
import logging

import httpx
from pydantic import ValidationError

from retail_planner.core.config import get_settings
from retail_planner.schemas.calendar import CalendarWeek
from retail_planner.schemas.planning import CalculationRow, ChartPoint
from retail_planner.schemas.sku import Sku, SkuCreate
from retail_planner.schemas.store import Store

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised for any failed call to the planning API.

    Transport errors, non-2xx responses and malformed payloads all end up
    here; the dashboard views do not tell them apart.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _unwrap(payload: Any, key: str) -> List[Any]:
    # Listing endpoints may answer with a bare list or {key: [...]}
    if isinstance(payload, dict) and key in payload:
        payload = payload[key]
    if not isinstance(payload, list):
        raise ApiError(f"Expected a list of {key}, got {type(payload).__name__}")
    return payload


class PlanningApiClient:
    """Async client for the planning REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.HTTP_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "PlanningApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiError(
                f"{method} {path} failed with status {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ApiError(f"{method} {path} failed: {e}") from e
        return response

    async def _get_json(self, path: str) -> Any:
        response = await self._request("GET", path)
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"GET {path} returned invalid JSON") from e

    async def fetch_stores(self) -> List[Store]:
        payload = await self._get_json("/stores")
        try:
            return [Store.model_validate(item) for item in _unwrap(payload, "stores")]
        except ValidationError as e:
            raise ApiError(f"Malformed store payload: {e}") from e

    async def fetch_skus(self) -> List[Sku]:
        payload = await self._get_json("/skus")
        try:
            return [Sku.model_validate(item) for item in _unwrap(payload, "skus")]
        except ValidationError as e:
            raise ApiError(f"Malformed SKU payload: {e}") from e

    async def create_sku(self, sku: SkuCreate) -> Sku:
        response = await self._request("POST", "/skus", json=sku.model_dump(by_alias=True))
        logger.debug(f"Created SKU {sku.id}")
        try:
            return Sku.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ApiError(f"Malformed SKU payload: {e}") from e

    async def delete_sku(self, sku_id: str) -> None:
        await self._request("DELETE", f"/skus/{quote(sku_id, safe='')}")

    async def fetch_planning(self, store_id: str) -> List[Dict[str, Any]]:
        """Raw planning rows for a store, returned exactly as served."""
        payload = await self._get_json(f"/planning/{quote(store_id, safe='')}")
        return _unwrap(payload, "planning")

    async def fetch_calculations(self, store_id: str) -> List[CalculationRow]:
        payload = await self._get_json(f"/calculations/{quote(store_id, safe='')}")
        try:
            return [CalculationRow.model_validate(item) for item in _unwrap(payload, "calculations")]
        except ValidationError as e:
            raise ApiError(f"Malformed calculation payload: {e}") from e

    async def fetch_calendar(self) -> List[CalendarWeek]:
        payload = await self._get_json("/calendar")
        try:
            return [CalendarWeek.model_validate(item) for item in _unwrap(payload, "calendar")]
        except ValidationError as e:
            raise ApiError(f"Malformed calendar payload: {e}") from e

    async def fetch_charts(self) -> List[ChartPoint]:
        payload = await self._get_json("/charts")
        try:
            return [ChartPoint.model_validate(item) for item in _unwrap(payload, "charts")]
        except ValidationError as e:
            raise ApiError(f"Malformed chart payload: {e}") from e
