import json
from typing import Any, Dict, List, Union

from app.errors import QuoteError, invalid_json
from app.schemas import Address, AnyLineItem, DraftOrder, DraftOrderEnvelope, NoteAttribute

QUOTE_TAG = "quote-request"
DEFAULT_SOURCE = "request-quote-form"
REQUIRED_CUSTOMER_FIELDS = ("name", "phone", "email", "address")


def parse_body(body: Any) -> Union[Any, QuoteError]:
    """
    Decode a request body into a payload.

    Accepts an already decoded object, raw bytes or a JSON string. A JSON
    document that decodes to a string (double-encoded form posts) is decoded
    once more.
    """
    if not body:
        return {}
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            return invalid_json(str(e))
    if isinstance(body, str):
        try:
            body = json.loads(body)
            if isinstance(body, str):
                body = json.loads(body) if body else {}
        except ValueError as e:
            # JSONDecodeError, or an integer literal past the int conversion limit
            return invalid_json(str(e))
    return body


def _section(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


def validate_payload(payload: Any) -> List[str]:
    errors: List[str] = []
    if not isinstance(payload, dict):
        errors.append("Payload must be a JSON object.")
        return errors

    customer = _section(payload, "customer")
    for field in REQUIRED_CUSTOMER_FIELDS:
        if not customer.get(field):
            errors.append(f"customer.{field} is required.")

    items = _section(payload, "cart").get("items")
    if not isinstance(items, list) or not items:
        errors.append("cart.items must contain at least one item.")

    return errors


def build_note(customer: Dict[str, Any]) -> str:
    parts = [f"Quote request from {customer.get('name')}"]
    if customer.get("phone"):
        parts.append(f"Phone: {customer['phone']}")
    if customer.get("email"):
        parts.append(f"Email: {customer['email']}")
    if customer.get("comment"):
        parts.append(f"Comment: {customer['comment']}")
    return " | ".join(parts)


def build_note_attributes(
    customer: Dict[str, Any], cart: Dict[str, Any], context: Dict[str, Any]
) -> List[NoteAttribute]:
    attributes = [
        NoteAttribute(name="request_source", value=context.get("source") or DEFAULT_SOURCE),
        NoteAttribute(name="request_comment", value=customer.get("comment") or ""),
    ]
    if cart.get("note"):
        attributes.append(NoteAttribute(name="cart_note", value=cart["note"]))
    return attributes


def build_draft_order(payload: Dict[str, Any], line_items: List[AnyLineItem]) -> DraftOrderEnvelope:
    """Assemble the Shopify draft order for an already validated quote request."""
    customer = _section(payload, "customer")
    cart = _section(payload, "cart")
    context = _section(payload, "context")

    address = Address(name=customer["name"], address1=customer["address"], phone=customer["phone"])
    draft = DraftOrder(
        tags=QUOTE_TAG,
        email=customer["email"],
        note=build_note(customer),
        shipping_address=address,
        billing_address=address.model_copy(),
        note_attributes=build_note_attributes(customer, cart, context),
        line_items=line_items,
    )
    return DraftOrderEnvelope(draft_order=draft)


def to_wire(envelope: DraftOrderEnvelope) -> Dict[str, Any]:
    return envelope.model_dump(mode="json", exclude_none=True)
