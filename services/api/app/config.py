from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    shopify_store_domain: str = ""
    shopify_admin_access_token: str = ""
    shopify_api_version: str = "2024-07"
    cors_allow_origin: str = "*"
    log_level: str = "INFO"

    @property
    def is_configured(self) -> bool:
        return bool(self.shopify_store_domain and self.shopify_admin_access_token)

    @property
    def draft_orders_url(self) -> str:
        return (
            f"https://{self.shopify_store_domain}"
            f"/admin/api/{self.shopify_api_version}/draft_orders.json"
        )
