from __future__ import annotations
import os
from dotenv import load_dotenv
from app.config import CitizenRequestsAPIConfig


DEFAULT_API_URL = "https://agent-smith.replit.app"

load_dotenv()

def _get_required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Environment variable {name} is required but not set")
    return value

def load_citizen_requests_config() -> CitizenRequestsAPIConfig:
    api_key = _get_required_env("CITIZEN_REQUESTS_API_KEY")
    base_url = os.getenv("CITIZEN_REQUESTS_API_URL") or DEFAULT_API_URL

    timeout_str = os.getenv("CITIZEN_REQUESTS_TIMEOUT_SECONDS")
    timeout_seconds: float | None = None
    if timeout_str:
        try:
            timeout_seconds = float(timeout_str)
        except ValueError as exc:
            raise RuntimeError("CITIZEN_REQUESTS_TIMEOUT_SECONDS must be a number") from exc

    return CitizenRequestsAPIConfig(
        base_url=base_url,
        api_key=api_key,
        timeout_seconds=timeout_seconds,
    )
