from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from common.errors import StorageError, ValidationError
from guestbook.core.entry import Entry, validate_fields
from guestbook.stores.base import GuestbookStore


logger = logging.getLogger("portfolio.guestbook")


def _error_message(response: httpx.Response) -> str:
    """Pull the service's own message out of an error response if it has one."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error", "msg"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    text = " ".join(response.text.split())[:300]
    return text or f"HTTP {response.status_code}"


class RemoteTableGuestbookStore(GuestbookStore):
    """Guestbook rows kept in a PostgREST table (e.g. Supabase).

    Ids, timestamps, ordering and durability all come from the remote
    service; this class only validates input and translates failures into
    StorageError.
    """

    backend = "remote"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = "guestbook",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.endpoint = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self.table = table
        self.timeout = timeout
        self._api_key = api_key
        self._transport = transport

    def list(self) -> List[Entry]:
        rows = self._request(
            "GET",
            params={"select": "*", "order": "created_at.desc"},
        )
        return [self._to_entry(row) for row in rows]

    def append(self, name: str, message: str) -> Entry:
        name, message = validate_fields(name, message)
        rows = self._request(
            "POST",
            json=[{"name": name, "message": message}],
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise StorageError(f"Insert into '{self.table}' returned no rows")
        entry = self._to_entry(rows[0])
        logger.info("Guestbook entry %s inserted into remote table '%s'", entry.id, self.table)
        return entry

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

    def _request(
        self,
        method: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> List[Dict[str, Any]]:
        request_headers = self._headers()
        if headers:
            request_headers.update(headers)

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(
                    method,
                    self.endpoint,
                    params=params,
                    json=json,
                    headers=request_headers,
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            detail = _error_message(exc.response)
            logger.warning(
                "Remote table %s %s failed with %s: %s",
                method,
                self.table,
                exc.response.status_code,
                detail,
            )
            raise StorageError(detail) from exc
        except httpx.HTTPError as exc:
            logger.warning("Remote table %s %s unreachable: %s", method, self.table, exc)
            raise StorageError(f"Remote table request failed: {exc}") from exc
        except ValueError as exc:
            raise StorageError(f"Remote table returned invalid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise StorageError(f"Remote table returned unexpected payload: {type(data).__name__}")
        return data

    def _to_entry(self, row: Any) -> Entry:
        try:
            return Entry.model_validate(row)
        except (PydanticValidationError, ValidationError) as exc:
            raise StorageError(f"Remote table returned a malformed row: {exc}") from exc
