from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Mapping
from app.infrastructure.citizen_requests_client import CitizenRequestsClient


logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class SubmissionResult:
    request_id: str | None
    status: str | None = None

    @property
    def created(self) -> bool:
        return self.request_id is not None

class CitizenRequestService:
    def __init__(self, client: CitizenRequestsClient) -> None:
        self._client = client

    def submit_request(
        self,
        full_name: str,
        contact_email: str,
        request_type: str,
        description: str,
        extra_fields: Mapping[str, str] | None = None,
    ) -> SubmissionResult:
        """Create a citizen request and read back its initial status."""

        request_id = self._client.create_request(
            full_name,
            contact_email,
            request_type,
            description,
            extra_fields,
        )
        if request_id is None:
            logger.warning("Citizen request for %r was not created", full_name)
            return SubmissionResult(request_id=None)

        status = self._client.get_status(request_id)
        return SubmissionResult(request_id=request_id, status=status)

    def add_comment(self, request_id: str, comment: str) -> bool:
        return self._client.add_comment(request_id, comment)

    def list_requests(
        self,
        status: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> str | None:
        return self._client.list_requests(status=status, limit=limit, offset=offset)
