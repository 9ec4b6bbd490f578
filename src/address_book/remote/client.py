from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from address_book.models import PACKAGE_NAME, AddressBookError, LookupResult
from address_book.normalizer import normalize_lookup_response
from address_book.remote.config import LookupConfig

logger = logging.getLogger(__name__)


class AddressLookupClient:
    """REST client for the postcode/house number address lookup API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[LookupConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config or LookupConfig()
        self.base_url = base_url or self._config.base_url
        self._timeout = timeout if timeout is not None else self._config.timeout
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self._timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> AddressLookupClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def lookup(self, postcode: str, house_number: str) -> dict[str, Any]:
        """Fetch the raw lookup payload for ``postcode`` and ``house_number``.

        Raises:
            AddressBookError: On transport failure, an HTTP error status or a
                payload that is not a JSON object.
        """
        params = {"postcode": postcode, "streetnumber": house_number}
        try:
            response = self._client.get(self._config.path, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Address lookup failed for %s %s: %s", postcode, house_number, exc)
            raise AddressBookError(
                "lookup_request",
                str(exc),
                {"package": PACKAGE_NAME},
            ) from exc

        if response.is_error:
            detail: Optional[str] = None
            try:
                payload = response.json()
                if isinstance(payload, dict):
                    detail = payload.get("detail") or payload.get("message")
            except ValueError:
                detail = None
            message = detail or response.text or response.reason_phrase
            logger.warning("Address lookup returned %d: %s", response.status_code, message)
            raise AddressBookError(
                "lookup_http_error",
                f"{response.status_code}: {message}",
                {"package": PACKAGE_NAME, "status": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise AddressBookError(
                "lookup_parse",
                "Lookup API returned invalid JSON",
                {"package": PACKAGE_NAME},
            ) from exc
        if not isinstance(payload, dict):
            raise AddressBookError(
                "lookup_parse",
                "Lookup API returned non-object payload",
                {"package": PACKAGE_NAME},
            )
        return payload

    def find_addresses(self, postcode: str, house_number: str) -> LookupResult:
        """Look up and normalize the candidate addresses.

        Raises:
            AddressBookError: If the lookup itself fails.
            AddressBookValidationError: If the payload has no ``details`` list.
        """
        payload = self.lookup(postcode, house_number)
        return normalize_lookup_response(payload, house_number)
