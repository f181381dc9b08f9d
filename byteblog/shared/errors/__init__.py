from .base import (
    AppError,
    DomainError,
    HashError,
    InfrastructureError,
    StoreUnavailableError,
    ValidationError,
    VerifyError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "HashError",
    "InfrastructureError",
    "StoreUnavailableError",
    "ValidationError",
    "VerifyError",
    "handle_app_error",
    "register_error_handler",
]
