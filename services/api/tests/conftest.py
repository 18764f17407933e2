"""Pytest fixtures: an app wired to a fake Shopify Admin API."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


class FakeShopify:
    """Records every outbound request and answers with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 201
        self.body = {"draft_order": {"id": 1001, "invoice_url": "https://shop.test/invoices/abc"}}
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last_payload(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        shopify_store_domain="shop.test",
        shopify_admin_access_token="shpat_test",
        shopify_api_version="2024-07",
        cors_allow_origin="https://storefront.test",
    )


@pytest.fixture
def shopify():
    return FakeShopify()


@pytest.fixture
def client(settings, shopify):
    app = create_app(settings, transport=httpx.MockTransport(shopify))
    return TestClient(app)


@pytest.fixture
def valid_payload():
    return {
        "customer": {"name": "A", "phone": "1", "email": "a@b.com", "address": "X"},
        "cart": {"items": [{"variant_id": "V1", "quantity": 2}]},
    }
