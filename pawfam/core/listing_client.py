# pawfam/core/listing_client.py
"""
Client for the remote vendor adoption feed.

The feed is a JSON array of listing records whose shape varies by
vendor. This client only fetches; parsing and normalization happen in
`pawfam.services.listing_service`.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from pawfam.core.config import Settings

logger = logging.getLogger(__name__)


class VendorListingClient:
    def __init__(
        self,
        url: str | None,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> VendorListingClient:
        return cls(url=settings.VENDOR_LISTINGS_URL, timeout=settings.VENDOR_LISTINGS_TIMEOUT)

    def fetch(self) -> list[dict[str, Any]]:
        """
        Fetch raw listing records.

        Failures are logged and produce an empty list: the adoption page
        falls back to other sources instead of surfacing the error.
        """
        if not self.url:
            return []

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.get(self.url)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Vendor listing feed unavailable (%s): %s", self.url, exc)
            return []

        # Accept either a bare array or {"pets": [...]}
        if isinstance(data, dict):
            data = data.get("pets")
        if not isinstance(data, list):
            logger.warning("Vendor listing feed returned an unexpected payload")
            return []
        return [item for item in data if isinstance(item, dict)]
