from datetime import datetime, timezone
from typing import Optional
import logging

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from app.clients.shopify import ShopifyClient
from app.config import Settings
from app.errors import QuoteError, method_not_allowed
from app.quote import process_quote
from app.schemas import HealthStatus

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["POST", "OPTIONS"]
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the API. Settings are read once here and shared read-only by every request."""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Quote Bridge API", version="0.1.0")
    app.state.settings = settings
    app.state.shopify = ShopifyClient(settings, transport=transport)

    # --- CORS on every response ---
    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
        response.headers["Access-Control-Allow-Methods"] = ", ".join(ALLOWED_METHODS)
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
        response.headers["Access-Control-Max-Age"] = "86400"
        return response

    # --- Healthcheck ---
    @app.api_route("/health", methods=ANY_METHOD, response_model=HealthStatus)
    @app.api_route("/api/health", methods=ANY_METHOD, response_model=HealthStatus)
    def health():
        return HealthStatus(timestamp=_utc_now())

    # --- Quote request -> draft order ---
    @app.api_route("/api/quote", methods=ANY_METHOD)
    async def quote(request: Request):
        if request.method not in ALLOWED_METHODS:
            return method_not_allowed().to_response()
        if request.method == "OPTIONS":
            return Response(status_code=204)

        body = await request.body()
        result = await process_quote(body, request.app.state.settings, request.app.state.shopify)
        if isinstance(result, QuoteError):
            return result.to_response()
        return JSONResponse(status_code=200, content=result.model_dump(mode="json", exclude_none=True))

    logger.info("Quote bridge ready (store=%s, api=%s)", settings.shopify_store_domain or "-", settings.shopify_api_version)
    return app


app = create_app()
