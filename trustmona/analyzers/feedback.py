from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from trustmona.analyzers.common import require_text
from trustmona.errors import InvalidRequest
from trustmona.providers.reports import ReportStore


def _present(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


@dataclass(frozen=True)
class FeedbackReport:
    url: str
    user_vote: Any
    trust_score: Optional[Any] = None
    risk_level: Optional[Any] = None
    comment: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "FeedbackReport":
        url = require_text(payload, "url")
        user_vote = payload.get("userVote") if isinstance(payload, dict) else None
        if not url or not _present(user_vote):
            raise InvalidRequest("URL and userVote are required")

        return cls(
            url=url,
            user_vote=user_vote,
            trust_score=payload.get("monaScore"),
            risk_level=payload.get("aiRiskLevel"),
            comment=payload.get("comment"),
        )

    def to_record(self) -> Dict[str, Any]:
        # Column names of the `reports` table
        return {
            "url": self.url,
            "monaScore": self.trust_score,
            "aiRiskLevel": self.risk_level,
            "userVote": self.user_vote,
            "comment": self.comment,
        }


def submit_report(payload: Dict[str, Any], store: ReportStore) -> List[Dict[str, Any]]:
    """Validate and persist one feedback report. Raises ReportStoreError on write failure."""
    report = FeedbackReport.from_payload(payload)
    return store.insert(report.to_record())
