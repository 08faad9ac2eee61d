"""HTTP transport to the Sendinblue API."""

import logging
from json import JSONDecodeError

import requests

from sendinblue_api.exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.brevo.com/v3"
DEFAULT_TIMEOUT = 10


def normalize_error(body) -> str:
    """
    Turn a decoded error body into a single human readable message.

    The fields are looked up in this order: `error`, `message`,
    `error_description`, `errorSummary` (only along with `errorCode`) and `code`.
    """
    if not isinstance(body, dict):
        return ""

    error_info = []
    for key in ("error", "message", "error_description"):
        if body.get(key):
            error_info.append(str(body[key]))
    if "errorCode" in body and body.get("errorSummary"):
        error_info.append(str(body["errorSummary"]))
    if body.get("code"):
        error_info.append(str(body["code"]))

    return ", ".join(error_info)


class Transport:
    """
    Authenticated client for the Sendinblue API.

    Every call carries the static `api-key` header and is bounded by `timeout`.
    Non-2xx answers and network failures are raised as `TransportError` with a
    normalized message; this is the only place where remote errors are decoded.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        """Configure the session used for every call."""
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "api-key": api_key,
                "accept": "application/json",
                "content-type": "application/json",
            }
        )

    def url(self, path: str) -> str:
        """Return the absolute URL of an API path."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, params: dict | None = None, json: dict | None = None):
        """
        Call the Sendinblue API and return the decoded JSON body.

        Returns None when the answer has no body (e.g. 204 No Content).

        Raises:
            TransportError: on network failure or non-2xx response.

        """
        url = self.url(path)
        try:
            response = self._session.request(method, url, params=params, json=json, timeout=self._timeout)
        except requests.RequestException as err:
            logger.error("Call to %s %s failed: %s", method, url, err)
            raise TransportError(str(err) or err.__class__.__name__) from err

        if not response.ok:
            body = self._decode(response)
            message = normalize_error(body) or f"HTTP {response.status_code}"
            logger.error("Call to %s %s resulted in %s response. %s", method, url, response.status_code, message)
            raise TransportError(message, status_code=response.status_code, body=body if isinstance(body, dict) else None)

        return self._decode(response)

    @staticmethod
    def _decode(response):
        """Decode a JSON body, None if there is none."""
        if not response.content:
            return None
        try:
            return response.json()
        except (JSONDecodeError, ValueError):
            return None

    def close(self):
        """Release the pooled connections."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
