import logging
from typing import Any, Union

from pydantic import ValidationError

from app.clients.shopify import ShopifyClient
from app.config import Settings
from app.draft_order import build_draft_order, parse_body, to_wire, validate_payload
from app.errors import (
    QuoteError,
    internal_error,
    invalid_payload,
    server_not_configured,
    shopify_error,
)
from app.line_items import map_line_items
from app.schemas import QuoteCreated

logger = logging.getLogger(__name__)


def _validation_details(exc: ValidationError):
    return [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]


async def process_quote(body: Any, settings: Settings, client: ShopifyClient) -> Union[QuoteCreated, QuoteError]:
    """
    Turn a quote-request body into a Shopify draft order.

    Every step either yields its value or a QuoteError; the first error is
    returned as-is and nothing after it runs.
    """
    if not settings.is_configured:
        logger.error("Shopify credentials missing (SHOPIFY_STORE_DOMAIN / SHOPIFY_ADMIN_ACCESS_TOKEN)")
        return server_not_configured("Shopify credentials are not configured")

    payload = parse_body(body)
    if isinstance(payload, QuoteError):
        logger.warning("Quote request rejected: invalid JSON (%s)", payload.message)
        return payload

    errors = validate_payload(payload)
    if errors:
        logger.warning("Quote request rejected: %s", "; ".join(errors))
        return invalid_payload(errors)

    try:
        line_items = map_line_items(payload["cart"]["items"])
        if not line_items:
            logger.warning("Quote request rejected: no usable line items")
            return invalid_payload(["No valid line items were provided."])
        envelope = build_draft_order(payload, line_items)
    except ValidationError as e:
        details = _validation_details(e)
        logger.warning("Quote request rejected: %s", "; ".join(details))
        return invalid_payload(details)

    try:
        response = await client.create_draft_order(to_wire(envelope))
        if not response.is_success:
            logger.error("Shopify API error %s: %s", response.status_code, response.text)
            return shopify_error(response.status_code)

        data = response.json()
        draft = data.get("draft_order") if isinstance(data, dict) else None
        if not isinstance(draft, dict):
            draft = {}
        created = QuoteCreated(draftOrderId=draft.get("id"), invoiceUrl=draft.get("invoice_url"))
    except Exception as e:
        logger.exception("Draft order creation failed")
        return internal_error(str(e))

    logger.info("Draft order %s created with %d line items", created.draftOrderId, len(line_items))
    return created
