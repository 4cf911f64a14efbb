"""
Optional fields for fundraiser creation.

Each option is a callable applied to the request's RequestForm. Options
run in the order given; the first one to raise aborts the call before the
request is sent.
"""
import io
from typing import BinaryIO, Callable, Optional, Union

import httpx

from fb_fundraisers import config
from fb_fundraisers.engine.request_form import RequestForm
from fb_fundraisers.engine.restricted_reader import IterableReader, RestrictedReader
from fb_fundraisers.errors import EncodingError

FormOption = Callable[[RequestForm], None]

COVER_PHOTO_FIELD = "cover_photo"
COPY_CHUNK_SIZE = 64 * 1024


def with_fundraiser_field(name: str, value: str) -> FormOption:
    """
    Add an optional text field.

    Optional fields supported by the Fundraiser API:
      external_fundraiser_uri   - URI of the fundraiser on the external site
      external_event_name       - Name of the event this fundraiser belongs to
      external_event_uri        - URI of the event this fundraiser belongs to
      external_event_start_time - Unix timestamp of the day the event takes place
    """
    def option(form: RequestForm) -> None:
        form.write_field(name, value)
    return option


def _read_capped(source: BinaryIO) -> bytes:
    reader = RestrictedReader(source, config.FUNDRAISER_COVER_PHOTO_IMAGE_MAX_SIZE)
    buffer = io.BytesIO()
    while True:
        chunk = reader.read(COPY_CHUNK_SIZE)
        if chunk is None:
            # Non-blocking source with no data ready.
            raise EncodingError(
                "fundraiser cover photo source returned no data; non-blocking readers are not supported"
            )
        if not chunk:
            return buffer.getvalue()
        buffer.write(chunk)


def _add_cover_photo(form: RequestForm, filename: str, source: BinaryIO) -> None:
    form.add_file(COVER_PHOTO_FIELD, filename, _read_capped(source))


def with_cover_photo_image(filename: str, content: Union[bytes, BinaryIO]) -> FormOption:
    """
    Attach a cover photo from raw bytes or a binary file object.

    Raises MaxSizeExceededError when the image is larger than
    FUNDRAISER_COVER_PHOTO_IMAGE_MAX_SIZE.
    """
    def option(form: RequestForm) -> None:
        source = io.BytesIO(content) if isinstance(content, (bytes, bytearray)) else content
        _add_cover_photo(form, filename, source)
    return option


def with_cover_photo_url(
    filename: str,
    url: str,
    http_client: Optional[httpx.Client] = None,
    timeout: Optional[float] = None,
) -> FormOption:
    """
    Attach a cover photo fetched from url.

    The image is fetched with its own HTTP client (bounded by timeout) and
    streamed through the same size cap as with_cover_photo_image. Fetch
    failures raise EncodingError; an oversize image raises MaxSizeExceededError.
    """
    def option(form: RequestForm) -> None:
        client = http_client or httpx.Client(
            timeout=timeout if timeout is not None else config.HTTP_TIMEOUT_SECONDS
        )
        try:
            with client.stream("GET", url) as response:
                if not response.is_success:
                    raise EncodingError(
                        f"error fetching fundraiser cover photo {url}: status {response.status_code}"
                    )
                _add_cover_photo(form, filename, IterableReader(response.iter_bytes(COPY_CHUNK_SIZE)))
        except httpx.HTTPError as exc:
            raise EncodingError(f"error fetching fundraiser cover photo {url}: {exc}") from exc
        finally:
            if http_client is None:
                client.close()
    return option
