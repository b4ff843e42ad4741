import datetime
import json
import logging
import math
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from trustmona.config import get_weight
from trustmona.scoring.signals import DomainAgeSignal, ModelVerdict, ProviderSignal
from trustmona.types import ConfigCat, RiskLevel, ScanType

logger = logging.getLogger(__name__)

SECONDS_PER_YEAR = 365 * 24 * 60 * 60

_SCHEME = re.compile(r"^https?://", re.IGNORECASE)
_FENCE = re.compile(r"^```[a-zA-Z]*\s*|\s*```$")
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")

# scan type → (fallback risk score, cause when unparsable, cause when the call failed)
FALLBACKS = {
    ScanType.URL: (
        int(get_weight(ConfigCat.MODEL, "url_fallback_score", 30)),
        "AI output parse failed",
        "AI API request failed",
    ),
    ScanType.TEXT: (
        int(get_weight(ConfigCat.MODEL, "text_fallback_score", 40)),
        "AI output could not be parsed",
        "AI service unavailable",
    ),
}


# ============================================================
# DOMAIN
# ============================================================

def extract_domain(url: str) -> str:
    """Strip the scheme and path: https://Example.com/path -> Example.com (case preserved)."""
    return _SCHEME.sub("", url.strip()).split("/")[0]


def parse_timestamp(raw: Any) -> Optional[datetime.datetime]:
    """Parse a registry timestamp into an aware UTC datetime, or None."""
    if isinstance(raw, datetime.datetime):
        created = raw
    elif isinstance(raw, datetime.date):
        created = datetime.datetime(raw.year, raw.month, raw.day)
    elif isinstance(raw, str) and raw.strip():
        # "2015-03-26T10:44:09Z", "2002-09-12T21:40:10+0000", "1995-08-14"
        text = raw.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        text = _COMPACT_OFFSET.sub(r"\1:\2", text) if "T" in text or " " in text else text
        try:
            created = datetime.datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if created.tzinfo is None:
        return created.replace(tzinfo=datetime.timezone.utc)
    return created.astimezone(datetime.timezone.utc)


def normalize_domain_age(raw_lookup: Optional[Dict[str, Any]],
                         now: Optional[datetime.datetime] = None) -> DomainAgeSignal:
    """
    Turn a domain lookup result into an age in years.

    Never raises: a failed lookup, a missing creation date or an unparsable
    one all yield an absent age with the cause recorded.
    """
    if not raw_lookup or not raw_lookup.get("ok"):
        reason = (raw_lookup or {}).get("reason") or "lookup failed"
        return DomainAgeSignal(error=reason)

    data = raw_lookup.get("data") or {}
    source = raw_lookup.get("source")
    raw_created = data.get("createdDate") if isinstance(data, dict) else None
    if raw_created is None:
        return DomainAgeSignal(source=source, error="creation date missing")

    created = parse_timestamp(raw_created)
    if created is None:
        return DomainAgeSignal(source=source, error=f"unparsable creation date: {raw_created!r}")

    now = now or datetime.datetime.now(datetime.timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)

    age_years = (now - created).total_seconds() / SECONDS_PER_YEAR
    return DomainAgeSignal(age_years=age_years, source=source)


# ============================================================
# MODEL
# ============================================================

def _load_json_object(text: str) -> Any:
    """
    Defensive JSON extraction from free-form model text.

    1. strict parse
    2. strip Markdown code fences
    3. outermost {...} span
    """
    try:
        return json.loads(text)
    except ValueError:
        pass

    unfenced = _FENCE.sub("", text.strip())
    try:
        return json.loads(unfenced)
    except ValueError:
        pass

    start, end = unfenced.find("{"), unfenced.rfind("}")
    if start == -1 or end <= start:
        raise ValueError("no JSON object found")
    return json.loads(unfenced[start:end + 1])


def fallback_signal(scan_type: ScanType, reason: str) -> ProviderSignal:
    score = FALLBACKS[scan_type][0]
    return ProviderSignal(RiskLevel.MEDIUM, score, [reason], degraded=True)


def clamp_risk_score(score: float) -> int:
    """Round half up to an integer inside [0, 100]."""
    return int(min(100, max(0, math.floor(score + 0.5))))


def normalize_model_signal(raw_model: Optional[Dict[str, Any]], scan_type: ScanType) -> ProviderSignal:
    """
    Turn a model result into a ProviderSignal.

    A failed call or text that does not match {risk_level, risk_score, reasons}
    yields the fixed medium-risk fallback for the scan type.
    """
    _, parse_reason, unavailable_reason = FALLBACKS[scan_type]

    if not raw_model or not raw_model.get("ok"):
        return fallback_signal(scan_type, unavailable_reason)

    text = raw_model.get("data")
    if not isinstance(text, str):
        return fallback_signal(scan_type, parse_reason)

    try:
        verdict = ModelVerdict.model_validate(_load_json_object(text))
    except (ValueError, ValidationError, RecursionError) as e:
        logger.warning("AI JSON parse error (%s): %r", e.__class__.__name__, text)
        return fallback_signal(scan_type, parse_reason)

    return ProviderSignal(
        risk_level=verdict.risk_level,
        risk_score=clamp_risk_score(verdict.risk_score),
        reasons=list(verdict.reasons),
    )
