from typing import Any, Dict, Optional
import logging

import httpx

from app.config import Settings

logger = logging.getLogger(__name__)


class ShopifyClient:
    """
    Thin wrapper over the Admin REST API. One request per call, no retries.

    No client-side timeout: a slow draft creation holds the request until
    Shopify or the hosting platform gives up.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self.settings.shopify_admin_access_token,
        }

    async def create_draft_order(self, payload: Dict[str, Any]) -> httpx.Response:
        """
        payload: {"draft_order": {...}}
        returns the raw response; status handling is left to the caller.
        """
        url = self.settings.draft_orders_url
        logger.debug("POST %s", url)
        async with httpx.AsyncClient(transport=self.transport, timeout=None) as client:
            return await client.post(url, json=payload, headers=self._headers())
