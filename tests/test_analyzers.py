"""Analyzer tests: call order, injected clock, feedback validation."""
import datetime

import pytest

from trustmona.analyzers.feedback import FeedbackReport, submit_report
from trustmona.analyzers.text_analyzer import analyze_text
from trustmona.analyzers.url_analyzer import analyze_url
from trustmona.errors import InvalidRequest
from trustmona.providers.reports import ReportStoreError

from conftest import FakeLookup, FakeModel, FakeReportStore, verdict


class TestAnalyzeUrl:

    def test_lookup_completes_before_model_call(self, make_providers):
        order = []

        class OrderedLookup(FakeLookup):
            def run(self, domain):
                order.append("lookup")
                return super().run(domain)

        class OrderedModel(FakeModel):
            def run(self, prompt):
                order.append("model")
                return super().run(prompt)

        providers = make_providers(
            lookup=OrderedLookup(fail="timeout"),
            model=OrderedModel(text=verdict()),
        )
        analyze_url("example.com", providers)

        assert order == ["lookup", "model"]

    def test_six_month_old_domain(self, make_providers, fixed_now):
        created = (fixed_now - datetime.timedelta(days=182)).isoformat()
        providers = make_providers(
            lookup=FakeLookup(created=created),
            model=FakeModel(text=verdict("low", 0, [])),
        )

        result = analyze_url("https://new-shop.example", providers, now=fixed_now)

        assert result["monaScore"] == 75
        assert result["reasons"] == ["Very new domain"]

    def test_domain_is_passed_to_lookup(self, make_providers):
        providers = make_providers()
        analyze_url("  HTTPS://Login.Example.com/reset?x=1  ", providers)
        assert providers.lookup.calls == ["Login.Example.com"]

    def test_blank_url(self, make_providers):
        with pytest.raises(InvalidRequest, match="URL required"):
            analyze_url("", make_providers())


class TestAnalyzeText:

    def test_scores(self, make_providers):
        providers = make_providers(model=FakeModel(text=verdict("medium", 45, ["Unsolicited offer"])))
        result = analyze_text("Work from home, reply YES", providers)

        assert result["monaScore"] == 55
        assert result["type"] == "message_scan"
        assert "domain" not in result

    def test_blank_message(self, make_providers):
        with pytest.raises(InvalidRequest, match="Message text required"):
            analyze_text("  ", make_providers())


class TestFeedback:

    def test_from_payload(self):
        report = FeedbackReport.from_payload({
            "url": " https://a.io ", "monaScore": 12, "aiRiskLevel": "high", "userVote": True,
        })

        assert report.url == "https://a.io"
        assert report.user_vote is True
        assert report.to_record() == {
            "url": "https://a.io", "monaScore": 12, "aiRiskLevel": "high", "userVote": True, "comment": None,
        }

    @pytest.mark.parametrize("payload", [
        {},
        {"url": 42, "userVote": "scam"},
        {"url": "https://a.io", "userVote": False},
        {"url": "https://a.io", "userVote": None},
    ])
    def test_invalid(self, payload):
        with pytest.raises(InvalidRequest):
            FeedbackReport.from_payload(payload)

    def test_store_error_propagates(self):
        with pytest.raises(ReportStoreError):
            submit_report({"url": "https://a.io", "userVote": "scam"}, FakeReportStore(fail=True))
