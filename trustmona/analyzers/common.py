import logging
from typing import Any, Dict

from trustmona.providers.base import Provider

logger = logging.getLogger(__name__)


def run_provider(provider: Provider, target: str) -> Dict[str, Any]:
    """
    Run one provider call. An unexpected crash becomes an "unavailable"
    result so the scan still produces a verdict.
    """
    try:
        return provider.run(target)
    except Exception as e:  # noqa: BLE001
        logger.exception("%s crashed", provider.name)
        return provider.unavailable(f"{provider.name} crashed: {e}")


def require_text(payload: Dict[str, Any], field: str) -> str:
    value = payload.get(field) if isinstance(payload, dict) else None
    if not isinstance(value, str) or not value.strip():
        return ""
    return value.strip()
