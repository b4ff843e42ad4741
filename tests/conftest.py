"""
Pytest fixtures for TrustMona.

Collaborators are replaced by in-memory fakes injected through Providers,
so no test touches the network.
"""
import datetime
import json

import pytest

from trustmona.providers.base import Provider
from trustmona.providers.registry import Providers
from trustmona.providers.reports import ReportStoreError


# =============================================================================
# FAKE COLLABORATORS
# =============================================================================

class FakeLookup(Provider):
    name = "whois_lookup"

    def __init__(self, created=None, fail=None, crash=False):
        super().__init__()
        self.created = created
        self.fail = fail
        self.crash = crash
        self.calls = []

    def run(self, domain):
        self.calls.append(domain)
        if self.crash:
            raise RuntimeError("boom")
        if self.fail:
            return self.unavailable(self.fail)
        return self.success({"createdDate": self.created}, source="whoisxml")


class FakeModel(Provider):
    name = "model"

    def __init__(self, text=None, fail=None):
        super().__init__()
        self.text = text
        self.fail = fail
        self.prompts = []

    def run(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            return self.unavailable(self.fail)
        return self.success(self.text)


class FakeReportStore(Provider):
    name = "reports"

    def __init__(self, fail=False):
        super().__init__()
        self.fail = fail
        self.records = []

    def insert(self, record):
        if self.fail:
            raise ReportStoreError("insert refused")
        self.records.append(record)
        return [dict(record, id=len(self.records))]


def verdict(level="low", score=10, reasons=("Looks fine",)):
    return json.dumps({"risk_level": level, "risk_score": score, "reasons": list(reasons)})


def years_ago(years):
    return (datetime.datetime.now(datetime.timezone.utc)
            - datetime.timedelta(days=365 * years)).isoformat()


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def fixed_now():
    return datetime.datetime(2024, 6, 1, tzinfo=datetime.timezone.utc)


@pytest.fixture
def make_providers():
    def _make(lookup=None, model=None, reports=None):
        return Providers(
            lookup=lookup or FakeLookup(created=years_ago(10)),
            model=model or FakeModel(text=verdict()),
            reports=reports or FakeReportStore(),
        )
    return _make
