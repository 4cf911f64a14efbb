import os
from dotenv import load_dotenv

load_dotenv()

HTTP_TIMEOUT_SECONDS: float = float(os.getenv("FB_FUNDRAISERS_HTTP_TIMEOUT", "20"))
DEBUG: str = os.getenv("FB_FUNDRAISERS_DEBUG", "false")

CREATE_FUNDRAISER_ENDPOINT = "https://graph.facebook.com/v2.8/me/fundraisers"

# Photos must be smaller than 4 MB.
FUNDRAISER_COVER_PHOTO_IMAGE_MAX_SIZE = (4 * 1024 * 1024) - 1

FUNDRAISER_TYPE = "person_for_charity"


def is_debug_enabled() -> bool:
    return DEBUG.strip().lower() in {"1", "true", "yes"}
