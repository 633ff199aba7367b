from .models import ClientDraft, ProductDraft, SaleDraft, DEFAULT_SALE_ITEMS
from .errors import AppError, ValidationError, ConfigError, TransportError, ResponseParseError, ApiError

__all__ = [
    "ClientDraft",
    "ProductDraft",
    "SaleDraft",
    "DEFAULT_SALE_ITEMS",
    "AppError",
    "ValidationError",
    "ConfigError",
    "TransportError",
    "ResponseParseError",
    "ApiError",
]
