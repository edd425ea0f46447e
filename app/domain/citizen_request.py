from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple


SOURCE_SYSTEM = "python-api-client"

RESERVED_REQUEST_KEYS = (
    "fullName",
    "contactInfo",
    "requestType",
    "description",
    "externalId",
    "sourceSystem",
)

def new_external_id() -> str:
    """Return a client-side correlation id such as ``EXT-1a2b3c4d``."""

    return "EXT-" + uuid.uuid4().hex[:8]

@dataclass(frozen=True)
class CitizenRequest:
    """Outbound payload for creating a citizen request.

        extra_fields are merged after the base fields; keys listed in
        RESERVED_REQUEST_KEYS are dropped from them so a caller can never
        replace the applicant data or the correlation tags.
        """

    full_name: str
    contact_info: str
    request_type: str
    description: str
    extra_fields: Tuple[Tuple[str, str], ...] = ()
    external_id: str = field(default_factory=new_external_id)
    source_system: str = SOURCE_SYSTEM

    def __post_init__(self) -> None:
        # stored as pairs so the request stays hashable
        if isinstance(self.extra_fields, Mapping):
            object.__setattr__(self, "extra_fields", tuple(self.extra_fields.items()))

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "fullName": self.full_name,
            "contactInfo": self.contact_info,
            "requestType": self.request_type,
            "description": self.description,
        }

        for key, value in self.extra_fields:
            if key in RESERVED_REQUEST_KEYS or key in payload:
                continue
            payload[key] = value

        payload["externalId"] = self.external_id
        payload["sourceSystem"] = self.source_system
        return payload

@dataclass(frozen=True)
class Comment:
    request_id: str
    comment: str
    source: str = SOURCE_SYSTEM

    def to_payload(self) -> Dict[str, Any]:
        return {
            "requestId": self.request_id,
            "comment": self.comment,
            "source": self.source,
        }
