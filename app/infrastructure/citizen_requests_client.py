from __future__ import annotations
import logging
from typing import Any, Dict, Mapping
from urllib.parse import quote
import requests
from requests import RequestException
from app.config import CitizenRequestsAPIConfig
from app.domain.citizen_request import CitizenRequest, Comment
from app.shared.errors import CitizenRequestsTransportError
from app.shared.json_text import (
    encode_json,
    extract_field,
    has_error_marker,
    has_success_marker,
    has_true_field,
)


logger = logging.getLogger(__name__)

REQUESTS_ENDPOINT = "/api/external/citizen-requests"
VALIDATE_KEY_ENDPOINT = "/api/external/validate-key"
STATUSES_ENDPOINT = "/api/external/statuses"

_GET_OK_STATUSES = frozenset({200})
_POST_OK_STATUSES = frozenset({200, 201})

class CitizenRequestsClient:
    """HTTP client for the external Citizen Requests API.
        Every call sends the API key in the X-API-Key header, performs a single
        request/response exchange and closes the response before returning.
        HTTP error statuses are logged and turned into None/False; network and
        stream failures are raised as CitizenRequestsTransportError.
        """

    def __init__(self, config: CitizenRequestsAPIConfig) -> None:
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._session = requests.Session()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "CitizenRequestsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def create_request(
        self,
        full_name: str,
        contact_email: str,
        request_type: str,
        description: str,
        extra_fields: Mapping[str, str] | None = None,
    ) -> str | None:
        """Create a citizen request and return the server-assigned id.
            Returns None when the API reports failure or the id is missing.
            """

        citizen_request = CitizenRequest(
            full_name=full_name,
            contact_info=contact_email,
            request_type=request_type,
            description=description,
            extra_fields=tuple((extra_fields or {}).items()),
        )

        response = self._post(REQUESTS_ENDPOINT, citizen_request.to_payload())
        if not has_success_marker(response):
            return None

        request_id = extract_field(response, "id")
        if request_id is not None:
            logger.info(
                "Created citizen request id=%s external_id=%s",
                request_id,
                citizen_request.external_id,
            )
        return request_id

    def get_status(self, request_id: str) -> str | None:
        response = self._get(_request_path(request_id))
        if response is None or has_error_marker(response):
            return None
        return extract_field(response, "status")

    def get_details(self, request_id: str) -> str | None:
        """Return the raw JSON text describing the request."""

        return self._get(_request_path(request_id))

    def add_comment(self, request_id: str, comment: str) -> bool:
        payload = Comment(request_id=request_id, comment=comment).to_payload()
        response = self._post(f"{_request_path(request_id)}/comments", payload)
        return has_success_marker(response)

    def list_requests(
        self,
        status: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> str | None:
        """Return the raw JSON text of one page of requests.
            The status filter is only sent when it is non-empty.
            """

        params: Dict[str, Any] = {"limit": limit, "offset": offset}
        if status:
            params["status"] = status
        return self._get(REQUESTS_ENDPOINT, params=params)

    def validate_api_key(self) -> bool:
        response = self._get(VALIDATE_KEY_ENDPOINT)
        return has_true_field(response, "valid")

    def list_statuses(self) -> str | None:
        return self._get(STATUSES_ENDPOINT)

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-API-Key": self._config.api_key,
        }

    def _get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> str | None:
        url = self._base_url + endpoint
        logger.debug("GET %s params=%s", url, params)

        try:
            response = self._session.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self._config.timeout_seconds,
                stream=True,
            )
        except RequestException as exc:
            raise _transport_error("GET", endpoint, exc) from exc

        return self._read_body(response, _GET_OK_STATUSES, "GET", endpoint)

    def _post(self, endpoint: str, payload: Mapping[str, Any]) -> str | None:
        url = self._base_url + endpoint
        logger.debug("POST %s", url)

        try:
            response = self._session.post(
                url,
                data=encode_json(payload).encode("utf-8"),
                headers=self._headers(),
                timeout=self._config.timeout_seconds,
                stream=True,
            )
        except RequestException as exc:
            raise _transport_error("POST", endpoint, exc) from exc

        return self._read_body(response, _POST_OK_STATUSES, "POST", endpoint)

    def _read_body(
        self,
        response: requests.Response,
        ok_statuses: frozenset[int],
        method: str,
        endpoint: str,
    ) -> str | None:
        """Read the response text and release the connection.
            Returns None (after logging the error body) on a non-success status.
            """

        try:
            if response.encoding is None:
                response.encoding = "utf-8"

            if response.status_code not in ok_statuses:
                logger.error(
                    "Citizen Requests API error on %s %s (HTTP %s): %s",
                    method,
                    endpoint,
                    response.status_code,
                    response.text.strip(),
                )
                return None

            return response.text
        except RequestException as exc:
            raise _transport_error(method, endpoint, exc) from exc
        finally:
            response.close()

def _request_path(request_id: str) -> str:
    return f"{REQUESTS_ENDPOINT}/{quote(str(request_id), safe='')}"

def _transport_error(
    method: str,
    endpoint: str,
    exc: RequestException,
) -> CitizenRequestsTransportError:
    msg = f"Error calling Citizen Requests API {method} {endpoint}: {exc}"
    logger.error(msg)
    return CitizenRequestsTransportError(msg)
