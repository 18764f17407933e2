from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from fastapi.responses import JSONResponse


@dataclass(frozen=True)
class QuoteError:
    """A terminal outcome for a quote request, mapped straight to a JSON response."""

    status_code: int
    error: str
    message: Optional[str] = None
    details: Optional[List[str]] = None
    status: Optional[int] = None

    def body(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"error": self.error}
        if self.status is not None:
            content["status"] = self.status
        if self.message is not None:
            content["message"] = self.message
        if self.details is not None:
            content["details"] = list(self.details)
        return content

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body())


def method_not_allowed() -> QuoteError:
    return QuoteError(405, "method_not_allowed")


def server_not_configured(message: str) -> QuoteError:
    return QuoteError(500, "server_not_configured", message=message)


def invalid_json(message: str) -> QuoteError:
    return QuoteError(400, "invalid_json", message=message)


def invalid_payload(details: List[str]) -> QuoteError:
    return QuoteError(400, "invalid_payload", details=details)


def shopify_error(status: int) -> QuoteError:
    return QuoteError(502, "shopify_error", message="Failed to create draft order.", status=status)


def internal_error(message: str) -> QuoteError:
    return QuoteError(500, "internal_error", message=message)
