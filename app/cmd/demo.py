from __future__ import annotations
import logging
from dataclasses import dataclass
from app.application.citizen_request_service import CitizenRequestService
from app.infrastructure.citizen_requests_client import CitizenRequestsClient
from app.infrastructure.config_loader import load_citizen_requests_config
from app.shared.errors import CitizenRequestsTransportError


logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class DemoRequest:
    full_name: str = "Ivanov Ivan Ivanovich"
    contact_email: str = "ivanov@example.com"
    request_type: str = "Information request"
    description: str = "Please provide a certificate of family composition"
    comment: str = "Additional information on the request"
    list_status: str = "new"
    list_limit: int = 10

def _build_service() -> tuple[CitizenRequestsClient, CitizenRequestService]:
    try:
        config = load_citizen_requests_config()
    except RuntimeError as exc:
        logger.error("Invalid Citizen Requests API configuration: %s", exc)
        raise SystemExit(1) from exc

    client = CitizenRequestsClient(config)
    return client, CitizenRequestService(client)

def run_demo(
    client: CitizenRequestsClient,
    service: CitizenRequestService,
    demo_request: DemoRequest = DemoRequest(),
) -> None:
    """Walk through every API operation once, logging each result."""

    if not client.validate_api_key():
        logger.warning("API key was not accepted by the Citizen Requests API")

    result = service.submit_request(
        demo_request.full_name,
        demo_request.contact_email,
        demo_request.request_type,
        demo_request.description,
        {"priority": "high", "department": "IT department"},
    )

    if result.created:
        logger.info("Created citizen request with ID: %s", result.request_id)
        logger.info("Request status: %s", result.status)

        comment_added = service.add_comment(result.request_id, demo_request.comment)
        logger.info("Comment added: %s", comment_added)

        details = client.get_details(result.request_id)
        logger.info("Request details: %s", details)
    else:
        logger.error("Failed to create citizen request")

    requests_list = service.list_requests(status=demo_request.list_status, limit=demo_request.list_limit)
    logger.info("Requests with status %r: %s", demo_request.list_status, requests_list)

    logger.info("Available statuses: %s", client.list_statuses())

def demo() -> None:
    client, service = _build_service()

    try:
        run_demo(client, service)
    except CitizenRequestsTransportError as exc:
        logger.error("Citizen Requests API is unreachable: %s", exc)
        raise SystemExit(1) from exc
    finally:
        client.close()
