"""
Graph API client: builds, sends and classifies fundraiser creation calls.

Flow: required fields → options → encode → POST → read → log → classify
"""
from typing import Optional

import httpx

from fb_fundraisers import config
from fb_fundraisers.engine.request_form import RequestForm
from fb_fundraisers.engine.response_reader import classify_response
from fb_fundraisers.errors import EncodingError, FundraiserClientError, TransportError
from fb_fundraisers.models.fundraiser import CreateFundraiserParams, FundraiserResult
from fb_fundraisers.services.call_logging import Logger, format_api_call
from fb_fundraisers.services.form_options import FormOption

HTTP_OK = 200


class APIClient:
    """
    HTTP client for the Facebook Fundraiser API.

    Calls are synchronous with no retries. The client keeps no per-call
    state, so one instance can serve concurrent calls if http_client can.

    Args:
        http_client: Transport to use. When omitted the client creates and owns
            an httpx.Client bounded by timeout.
        logger: Receives one message per completed call when the call failed,
            or for every call when debug is enabled.
        debug: Log successful calls too. Defaults to FB_FUNDRAISERS_DEBUG.
        timeout: Seconds to wait per call. Defaults to FB_FUNDRAISERS_HTTP_TIMEOUT.
    """

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
        logger: Optional[Logger] = None,
        debug: Optional[bool] = None,
        timeout: Optional[float] = None,
    ):
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.Client(
            timeout=timeout if timeout is not None else config.HTTP_TIMEOUT_SECONDS
        )
        self.logger = logger
        self.debug = config.is_debug_enabled() if debug is None else debug

    def close(self) -> None:
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def create_fundraiser(self, params: CreateFundraiserParams, *options: FormOption) -> FundraiserResult:
        """
        Create a new Facebook Fundraiser.

        Steps:
          1. Write the required fields from params.
          2. Apply each option in order (optional fields, cover photo).
          3. Encode the form as multipart/form-data and POST it with the caller's access token.
          4. Read and classify the response.

        Args:
            params: The required fundraiser parameters.
            options: Optional field setters from form_options.

        Returns:
            The decoded success response.

        Raises:
            EncodingError: A field or option could not be written.
            MaxSizeExceededError: The cover photo is over the size cap.
            TransportError: The request could not be sent or read.
            ResponseParseError: The success response is not a JSON object.
            PlatformError: The Graph API reported an error.
            InvalidResponseError: Unexpected status without an error payload.
        """
        form = _build_form(params, options)
        try:
            request = self.http_client.build_request(
                "POST",
                config.CREATE_FUNDRAISER_ENDPOINT,
                files=form.parts,
                headers={"Authorization": f"Bearer {params.access_token}"},
            )
            # Render the multipart body in memory before dispatch.
            request.read()
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"error encoding request {exc}") from exc
        try:
            response = self.http_client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise TransportError(f"error transporting request {exc}") from exc

        data = self._read_response(config.CREATE_FUNDRAISER_ENDPOINT, request, response, HTTP_OK)
        return FundraiserResult(status_code=response.status_code, data=data)

    def _read_response(
        self,
        endpoint: str,
        request: httpx.Request,
        response: httpx.Response,
        expected_status: int,
    ) -> dict:
        status = response.status_code
        body: Optional[bytes] = None
        failed = True
        try:
            # Only a known zero length skips the read; a missing header may still have a body.
            if response.headers.get("content-length") != "0":
                try:
                    body = response.read()
                except httpx.HTTPError as exc:
                    raise TransportError(f"error reading response {exc}") from exc
            data = classify_response(endpoint, expected_status, status, body)
            failed = False
            return data
        finally:
            response.close()
            if self.logger is not None and (self.debug or failed):
                self.logger.log(format_api_call(request.method, str(request.url), status, body))


def _build_form(params: CreateFundraiserParams, options: tuple[FormOption, ...]) -> RequestForm:
    form = RequestForm()
    fields = {
        "charity_id": params.charity_id,
        "name": params.title,
        "description": params.description,
        "goal_amount": str(params.goal),
        "currency": params.currency,
        "end_time": str(int(params.end_time.timestamp())),
        "external_id": params.external_id,
        "fundraiser_type": config.FUNDRAISER_TYPE,
    }
    for name, value in fields.items():
        form.write_field(name, value)

    for option in options:
        try:
            option(form)
        except FundraiserClientError:
            raise
        except Exception as exc:
            raise EncodingError(f"error applying fundraiser option: {exc}") from exc
    return form
