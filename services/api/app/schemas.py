from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional, Union


class DraftOrderModel(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)


# --- Outbound: Shopify draft order ---
class Address(DraftOrderModel):
    name: str
    address1: str
    phone: str


class NoteAttribute(DraftOrderModel):
    name: str
    value: str


class LineItemProperty(DraftOrderModel):
    name: str
    value: str


class LineItem(DraftOrderModel):
    quantity: int = 1
    properties: Optional[List[LineItemProperty]] = None


class VariantLineItem(LineItem):
    # price and title come from the catalog
    variant_id: Union[int, str]


class ProductLineItem(LineItem):
    product_id: Union[int, str]
    title: str
    price: Optional[str] = None


class CustomLineItem(LineItem):
    title: str
    price: Optional[str] = None


AnyLineItem = Union[VariantLineItem, ProductLineItem, CustomLineItem]


class DraftOrder(DraftOrderModel):
    tags: str = "quote-request"
    email: str
    note: str
    shipping_address: Address
    billing_address: Address
    note_attributes: List[NoteAttribute] = Field(default_factory=list)
    line_items: List[AnyLineItem]


class DraftOrderEnvelope(BaseModel):
    draft_order: DraftOrder


# --- Responses ---
class QuoteCreated(BaseModel):
    success: bool = True
    # passed through as returned by Shopify
    draftOrderId: Optional[Any] = None
    invoiceUrl: Optional[Any] = None


class HealthStatus(BaseModel):
    status: str = "ok"
    timestamp: str
