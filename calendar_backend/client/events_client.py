"""Async HTTP client for the events API."""

# Standard library imports
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

# External package imports
import httpx

# Local application imports
from ..utils.datetime_utils import to_iso

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class EventsApiError(Exception):
    """Raised for any non-2xx response from the events API."""

    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"Events API returned {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class EventsApiClient:
    """
    Thin async wrapper around /api/v1/events.

    The underlying httpx.AsyncClient can be injected (tests pass one backed
    by httpx.MockTransport); otherwise one is created and owned here.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "EventsApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> Dict[str, str]:
        headers = {"Cache-Control": "no-cache"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}/api/v1/events{path}"
        response = await self._client.request(method, url, headers=self._headers(), **kwargs)
        if response.is_error:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            logger.warning("%s %s failed with %s: %s", method, path, response.status_code, detail)
            raise EventsApiError(response.status_code, detail)
        return response.json()

    async def get_events(
        self,
        date: Union[datetime, str, None] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch events. Without a date every event is returned; with a date the
        day is returned, or the whole month when month (0-11) and year are given.
        """
        params: Dict[str, Any] = {}
        if date is not None:
            params["date"] = to_iso(date) if isinstance(date, datetime) else date
        if month is not None:
            params["month"] = month
        if year is not None:
            params["year"] = year
        body = await self._request("GET", "/get", params=params)
        return body["events"]

    async def get_events_per_day(self, month: int, year: int) -> List[int]:
        body = await self._request("GET", "/per-day", params={"month": month, "year": year})
        return body["eventsPerDay"]

    async def create_event(
        self,
        title: str,
        description: str,
        importance: int,
        date_time: Union[datetime, str],
    ) -> Dict[str, Any]:
        payload = {
            "title": title,
            "description": description,
            "importance": int(importance),
            "dateTime": to_iso(date_time) if isinstance(date_time, datetime) else date_time,
        }
        body = await self._request("POST", "/create", json=payload)
        return body["newEvent"]

    async def update_event(
        self,
        event_id: int,
        title: str,
        description: str,
        importance: int,
        date_time: Union[datetime, str],
    ) -> Dict[str, Any]:
        payload = {
            "id": event_id,
            "title": title,
            "description": description,
            "importance": int(importance),
            "dateTime": to_iso(date_time) if isinstance(date_time, datetime) else date_time,
        }
        body = await self._request("PUT", "/update", json=payload)
        return body["event"]

    async def delete_event(self, event_id: int) -> None:
        await self._request("DELETE", "/delete", params={"id": event_id})
