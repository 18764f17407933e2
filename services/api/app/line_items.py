import math
from enum import Enum
from typing import Any, Dict, List, Optional

from app.schemas import (
    AnyLineItem,
    CustomLineItem,
    LineItemProperty,
    ProductLineItem,
    VariantLineItem,
)

DEFAULT_TITLE = "Custom item"


class CartItemKind(str, Enum):
    VARIANT = "variant"
    PRODUCT = "product"
    CUSTOM = "custom"


def classify_cart_item(item: Dict[str, Any]) -> CartItemKind:
    if item.get("variant_id"):
        return CartItemKind.VARIANT
    if item.get("product_id"):
        return CartItemKind.PRODUCT
    return CartItemKind.CUSTOM


def to_number(value: Any) -> Optional[float]:
    """Numeric coercion for form values; None when the value is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def coerce_quantity(value: Any) -> int:
    """
    Permissive quantity: anything that is not a number of at least 1 becomes 1.

    Fractional quantities are truncated toward zero (2.9 -> 2), since draft
    order line items only take whole quantities.
    """
    number = to_number(value)
    if number is None or number < 1:
        return 1
    return int(number)


def format_price(cents: float) -> str:
    # amounts arrive in minor currency units
    return f"{cents / 100:.2f}"


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def map_properties(properties: Any) -> Optional[List[LineItemProperty]]:
    if not properties or not isinstance(properties, dict):
        return None
    kept = [
        LineItemProperty(name=str(name), value=_as_text(value))
        for name, value in properties.items()
        if value is not None and _as_text(value).strip() != ""
    ]
    return kept or None


def _title(item: Dict[str, Any]) -> str:
    return item.get("product_title") or item.get("title") or DEFAULT_TITLE


def _price(item: Dict[str, Any]) -> Optional[str]:
    raw = item.get("final_price")
    if raw is None:
        raw = item.get("price")
    cents = to_number(raw)
    return format_price(cents) if cents is not None else None


def _variant(item: Dict[str, Any], common: Dict[str, Any]) -> VariantLineItem:
    return VariantLineItem(variant_id=item["variant_id"], **common)


def _product(item: Dict[str, Any], common: Dict[str, Any]) -> ProductLineItem:
    return ProductLineItem(product_id=item["product_id"], title=_title(item), price=_product_price(item), **common)


def _product_price(item: Dict[str, Any]) -> Optional[str]:
    # without an explicit price the catalog price applies
    return _price(item) if item.get("price") else None


def _custom(item: Dict[str, Any], common: Dict[str, Any]) -> CustomLineItem:
    return CustomLineItem(title=_title(item), price=_price(item), **common)


_BUILDERS = {
    CartItemKind.VARIANT: _variant,
    CartItemKind.PRODUCT: _product,
    CartItemKind.CUSTOM: _custom,
}


def map_line_item(item: Any) -> Optional[AnyLineItem]:
    if not item or not isinstance(item, dict):
        return None
    common = {
        "quantity": coerce_quantity(item.get("quantity")),
        "properties": map_properties(item.get("properties")),
    }
    return _BUILDERS[classify_cart_item(item)](item, common)


def map_line_items(items: List[Any]) -> List[AnyLineItem]:
    mapped = (map_line_item(it) for it in items)
    return [li for li in mapped if li is not None]
