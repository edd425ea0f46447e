from __future__ import annotations
from dataclasses import dataclass


# citizen requests API
@dataclass(frozen=True)
class CitizenRequestsAPIConfig:
    base_url: str
    api_key: str
    timeout_seconds: float | None = None
