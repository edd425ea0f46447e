from __future__ import annotations


class CitizenRequestsTransportError(OSError):
    """Raised when the Citizen Requests API cannot be reached or its response stream breaks."""
