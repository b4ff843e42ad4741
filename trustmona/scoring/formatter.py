from typing import Any, Dict

from trustmona.scoring.score_engine import ScanResult
from trustmona.types import StatusLabel

BRAND = "TrustMona"
POWERED_BY = "TrustMona AI"
MESSAGE_SCAN_TYPE = "message_scan"

STATUS_TEXT = {
    StatusLabel.HIGH_RISK: "🚨 High Scam Risk",
    StatusLabel.MEDIUM_RISK: "⚠️ Medium Risk",
    StatusLabel.LOW_RISK: "✅ Low Risk",
}


def _envelope(result: ScanResult) -> Dict[str, Any]:
    return {
        "brand": BRAND,
        "status": STATUS_TEXT[result.status_label],
        "statusLabel": result.status_label.value,
        "monaScore": result.trust_score,
        "aiRiskLevel": result.risk_level.value,
        "reasons": list(result.reasons),
        "poweredBy": POWERED_BY,
    }


def format_url_scan(result: ScanResult) -> Dict[str, Any]:
    response = _envelope(result)
    response["domain"] = result.domain
    return response


def format_text_scan(result: ScanResult) -> Dict[str, Any]:
    response = _envelope(result)
    response["type"] = MESSAGE_SCAN_TYPE
    return response
