import datetime
from typing import Any, Dict, Optional

from trustmona.analyzers.common import run_provider
from trustmona.errors import InvalidRequest
from trustmona.prompts import url_prompt
from trustmona.providers.registry import Providers
from trustmona.scoring.formatter import format_url_scan
from trustmona.scoring.normalizer import extract_domain, normalize_domain_age, normalize_model_signal
from trustmona.scoring.score_engine import aggregate_url_scan
from trustmona.types import ScanType


def analyze_url(url: str, providers: Providers, now: Optional[datetime.datetime] = None) -> Dict[str, Any]:
    """
    Score a link.

    The domain lookup completes (successfully or not) before the model call
    is issued. Provider failures degrade the score, they never raise.
    """
    url = (url or "").strip()
    if not url:
        raise InvalidRequest("URL required")

    domain = extract_domain(url)

    # 1. Domain registration age
    age = normalize_domain_age(run_provider(providers.lookup, domain), now=now)

    # 2. Model verdict on the full link
    signal = normalize_model_signal(run_provider(providers.model, url_prompt(url)), ScanType.URL)

    result = aggregate_url_scan(domain, age, signal)
    return format_url_scan(result)
