from app.config import Settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SHOPIFY_STORE_DOMAIN", "env-shop.myshopify.com")
    monkeypatch.setenv("SHOPIFY_ADMIN_ACCESS_TOKEN", "shpat_env")
    monkeypatch.delenv("SHOPIFY_API_VERSION", raising=False)
    monkeypatch.delenv("CORS_ALLOW_ORIGIN", raising=False)
    settings = Settings(_env_file=None)
    assert settings.is_configured
    assert settings.cors_allow_origin == "*"
    assert settings.draft_orders_url == "https://env-shop.myshopify.com/admin/api/2024-07/draft_orders.json"


def test_settings_not_configured(monkeypatch):
    monkeypatch.delenv("SHOPIFY_STORE_DOMAIN", raising=False)
    monkeypatch.setenv("SHOPIFY_ADMIN_ACCESS_TOKEN", "shpat_env")
    assert not Settings(_env_file=None).is_configured
