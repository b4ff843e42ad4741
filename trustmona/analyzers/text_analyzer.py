from typing import Any, Dict

from trustmona.analyzers.common import run_provider
from trustmona.errors import InvalidRequest
from trustmona.prompts import text_prompt
from trustmona.providers.registry import Providers
from trustmona.scoring.formatter import format_text_scan
from trustmona.scoring.normalizer import normalize_model_signal
from trustmona.scoring.score_engine import aggregate_text_scan
from trustmona.types import ScanType


def analyze_text(message: str, providers: Providers) -> Dict[str, Any]:
    message = (message or "").strip()
    if not message:
        raise InvalidRequest("Message text required")

    signal = normalize_model_signal(run_provider(providers.model, text_prompt(message)), ScanType.TEXT)
    return format_text_scan(aggregate_text_scan(signal))
