"""
tagtracker/client/api_client.py

Thin requests wrapper around the event API.
"""
import requests
from typing import Any, List, Optional
from ..config import API_BASE, REQUEST_TIMEOUT_SEC
from ..models import Stats, TagEvent


class ApiError(Exception):
    """Server answered with a non-success status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"HTTP {status}: {message}")
        self.status = status
        self.message = message


class ApiClient:
    """
    Client for the event API.

    Transport failures surface as requests.RequestException; error
    responses are raised as ApiError.
    """

    def __init__(self, base_url: str = API_BASE, timeout: float = REQUEST_TIMEOUT_SEC,
                 session: Optional[requests.Session] = None) -> None:
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _check(self, response: requests.Response) -> Any:
        if not response.ok:
            message = response.reason or "Request failed"
            try:
                body = response.json()
                if isinstance(body, dict) and body.get("message"):
                    message = str(body["message"])
            except ValueError:
                pass
            raise ApiError(response.status_code, message)
        return response.json()

    def list_events(self) -> List[TagEvent]:
        """Fetch all events, newest first."""
        response = self.session.get(self._url("/api/events"), timeout=self.timeout)
        body = self._check(response)
        if not isinstance(body, list):
            raise ValueError(f"Expected a list of events, got {type(body).__name__}")
        return [TagEvent.from_dict(item) for item in body]

    def get_stats(self) -> Stats:
        response = self.session.get(self._url("/api/stats"), timeout=self.timeout)
        return Stats.from_dict(self._check(response))

    def create_event(self, tag_id: str, source: str, type_: str) -> TagEvent:
        """Post a new event and return the server's record."""
        response = self.session.post(
            self._url("/api/events"),
            json={"tagId": tag_id, "source": source, "type": type_},
            timeout=self.timeout,
        )
        return TagEvent.from_dict(self._check(response))
