"""EmailListVerify API client: single verification, bulk upload and file status."""

import logging
import os
from datetime import datetime, timezone
from typing import List, Optional, Union

import requests

from .errors import (
    AuthenticationError,
    ConfigurationError,
    InsufficientCreditsError,
    InvalidArgumentError,
    NotFoundError,
    UnrecognizedResponseError,
    UploadRejectedError,
)
from .models import FileStatus, SingleVerificationResult, VerificationStatus

logger = logging.getLogger(__name__)

BASE_URL = "https://apps.emaillistverify.com/api"

STATUS_FIELD_COUNT = 9


class EmailListVerify:
    """Client for the EmailListVerify HTTP API.

    Holds only the API key and base URL, so one instance can be shared
    freely. Each method issues exactly one request; nothing is retried.

    Args:
        api_key: EmailListVerify API key (``secret`` query parameter).
        base_url: Service root, overridable for testing.
        request_timeout: Local socket timeout in seconds handed to
            ``requests``. None (the default) waits for the service.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = BASE_URL,
        request_timeout: Optional[float] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError(
                f"API key is required. Visit {BASE_URL} to get your API key."
            )
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._request_timeout = request_timeout

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def verify_single_email(
        self, email: str, timeout: int = 30
    ) -> SingleVerificationResult:
        """Verify one address.

        ``timeout`` is the longest time in seconds the service may spend
        on the address; it is sent to the service, not enforced here.
        """
        if not email:
            raise InvalidArgumentError("Missing email address")

        body = self._get(
            "verifyEmail",
            {"secret": self._api_key, "email": email, "timeout": timeout},
        )
        if body == "key_not_valid":
            raise AuthenticationError("Invalid API Key")
        if body == "missing parameters":
            raise InvalidArgumentError("Missing parameters")
        try:
            return SingleVerificationResult(body)
        except ValueError:
            raise UnrecognizedResponseError(body) from None

    def bulk_upload(self, file_path: Union[str, "os.PathLike[str]"]) -> int:
        """Upload a CSV of addresses for bulk verification.

        Returns the file id to pass to :meth:`check_status`. Errors reading
        the file propagate as raised by the filesystem.
        """
        if not file_path:
            raise InvalidArgumentError("Missing File Path")

        filename = os.path.basename(file_path)
        with open(file_path, "rb") as fh:
            contents = fh.read()

        url = f"{self._base_url}/verifApiFile"
        logger.debug("POST %s filename=%s (%d bytes)", url, filename, len(contents))
        r = requests.post(
            url,
            params={"secret": self._api_key, "filename": filename},
            files={"file_contents": (filename, contents)},
            timeout=self._request_timeout,
        )
        logger.debug("POST %s -> %s", url, r.status_code)
        r.raise_for_status()
        body = r.text.strip()

        if body == "no_credit":
            raise InsufficientCreditsError(
                "Insufficient credits. Your current account balance is $0"
            )
        if body == "cannot_upload_file":
            raise UploadRejectedError(
                "The uploaded file could not be processed due to incorrect "
                "formatting or broken upload."
            )
        if body == "key_not_valid":
            raise AuthenticationError("Invalid API Key")
        if body == "missing parameters":
            raise InvalidArgumentError("Missing parameters")
        try:
            return int(body)
        except ValueError:
            raise UnrecognizedResponseError(body) from None

    def check_status(self, file_id: Union[int, str]) -> VerificationStatus:
        """Fetch a snapshot of a bulk verification job."""
        if not file_id:
            raise InvalidArgumentError("Missing File ID")
        try:
            file_id = int(file_id)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"Invalid File Id: {file_id!r}") from None

        try:
            body = self._get(
                "getApiFileInfo", {"secret": self._api_key, "id": file_id}
            )
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                raise NotFoundError("Invalid File Id") from e
            raise
        return self._parse_status_result(body)

    def _get(self, endpoint: str, params: dict) -> str:
        url = f"{self._base_url}/{endpoint}"
        logger.debug("GET %s", url)
        r = requests.get(url, params=params, timeout=self._request_timeout)
        logger.debug("GET %s -> %s", url, r.status_code)
        r.raise_for_status()
        return r.text.strip()

    @staticmethod
    def _parse_status_result(raw_body: str) -> VerificationStatus:
        """Parse ``id|filename|unique|total|processed|status|ts|link_all|link_ok``."""
        data: List[str] = raw_body.split("|")
        if data[0] == "key_not_valid":
            raise AuthenticationError("Invalid API Key")
        if data[0] == "missing_parameters":
            raise InvalidArgumentError("Missing File ID")
        if len(data) != STATUS_FIELD_COUNT:
            raise UnrecognizedResponseError(raw_body)

        try:
            return VerificationStatus(
                file_id=int(data[0]),
                filename=data[1],
                unique=data[2] == "yes",
                total_lines=int(data[3]),
                lines_processed=int(data[4]),
                status=FileStatus(data[5]),
                timestamp=datetime.fromtimestamp(int(data[6]), tz=timezone.utc),
                link_all=data[7],
                link_ok=data[8],
            )
        except (ValueError, OverflowError, OSError):
            raise UnrecognizedResponseError(raw_body) from None
