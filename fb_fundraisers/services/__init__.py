from .api_client import APIClient
from .call_logging import Logger, LoggerFunc, StandardLogger, format_api_call
from .form_options import (
    FormOption,
    with_fundraiser_field,
    with_cover_photo_image,
    with_cover_photo_url,
)

__all__ = [
    "APIClient",
    "Logger",
    "LoggerFunc",
    "StandardLogger",
    "format_api_call",
    "FormOption",
    "with_fundraiser_field",
    "with_cover_photo_image",
    "with_cover_photo_url",
]
