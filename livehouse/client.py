"""
HTTP client for a running livehouse server.

Used by the `livehouse events ...` commands. Mirrors what the browser does:
it logs in for a bearer token, refuses to send an event without a date and
title, and raises ClientError with the server's message on any non-2xx.
"""

from pathlib import Path
from typing import Optional

import requests

from livehouse.models import Event

DEFAULT_TIMEOUT = 15
MSG_REQUIRED_FIELDS = "Date and Title are required"

_MIME_BY_EXT = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
}


class ClientError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _event_from_dict(data: dict) -> Event:
    return Event(
        id=data.get("id"),
        date=data.get("date") or "",
        title=data.get("title") or "",
        artists=data.get("artists") or "",
        description=data.get("description") or "",
        open_time=data.get("openTime") or "",
        start_time=data.get("startTime") or "",
        ticket_price=data.get("ticketPrice") or "",
        door_price=data.get("doorPrice") or "",
        image_url=data.get("imageUrl") or "",
    )


def _event_body(event: Event) -> dict:
    if not event.date or not event.title:
        raise ClientError(MSG_REQUIRED_FIELDS)
    body = event.to_dict()
    body.pop("id")
    return body


class LivehouseClient:
    def __init__(self, base_url: str, token: Optional[str] = None, timeout: int = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token = token
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": "livehouse-cli/0.1"})

    def _request(self, method: str, path: str, **kwargs) -> dict | list:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            response = self.session.request(
                method, f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs,
            )
        except requests.RequestException as exc:
            raise ClientError(f"Could not reach {self.base_url}: {exc}") from exc

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not response.ok:
            message = data.get("error") if isinstance(data, dict) else None
            raise ClientError(message or f"HTTP {response.status_code}", response.status_code)
        return data

    # --- Session ---

    def login(self, password: str) -> str:
        self.token = self._request("POST", "/api/session", json={"password": password})["token"]
        return self.token

    def logout(self) -> None:
        if self.token:
            self._request("DELETE", "/api/session")
            self.token = None

    # --- Events ---

    def list_events(self) -> list[Event]:
        return [_event_from_dict(d) for d in self._request("GET", "/api/events")]

    def create_event(self, event: Event) -> int:
        data = self._request("POST", "/api/events", json=_event_body(event))
        event.id = data["id"]
        return event.id

    def update_event(self, event_id: int, event: Event) -> None:
        self._request("PUT", f"/api/events/{event_id}", json=_event_body(event))

    def delete_event(self, event_id: int) -> None:
        self._request("DELETE", f"/api/events/{event_id}")

    def upload_image(self, path: Path) -> str:
        mime = _MIME_BY_EXT.get(path.suffix.lower(), "application/octet-stream")
        with open(path, "rb") as f:
            data = self._request("POST", "/api/upload", files={"image": (path.name, f, mime)})
        return data["imageUrl"]
