"""Client for creating Facebook Fundraisers through the Graph API."""
from fb_fundraisers.config import CREATE_FUNDRAISER_ENDPOINT, FUNDRAISER_COVER_PHOTO_IMAGE_MAX_SIZE
from fb_fundraisers.errors import (
    FundraiserClientError,
    EncodingError,
    MaxSizeExceededError,
    TransportError,
    ResponseParseError,
    InvalidResponseError,
    PlatformError,
    error_codes,
    error_messages,
    is_cover_photo_error,
)
from fb_fundraisers.models import CreateFundraiserParams, FundraiserResult
from fb_fundraisers.services import (
    APIClient,
    LoggerFunc,
    StandardLogger,
    with_fundraiser_field,
    with_cover_photo_image,
    with_cover_photo_url,
)
from fb_fundraisers.validators.fundraiser_validator import AdvisoryIssue, check_fundraiser_params

__all__ = [
    "CREATE_FUNDRAISER_ENDPOINT",
    "FUNDRAISER_COVER_PHOTO_IMAGE_MAX_SIZE",
    "FundraiserClientError",
    "EncodingError",
    "MaxSizeExceededError",
    "TransportError",
    "ResponseParseError",
    "InvalidResponseError",
    "PlatformError",
    "error_codes",
    "error_messages",
    "is_cover_photo_error",
    "CreateFundraiserParams",
    "FundraiserResult",
    "APIClient",
    "LoggerFunc",
    "StandardLogger",
    "with_fundraiser_field",
    "with_cover_photo_image",
    "with_cover_photo_url",
    "AdvisoryIssue",
    "check_fundraiser_params",
]
