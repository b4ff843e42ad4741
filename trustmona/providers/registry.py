from dataclasses import dataclass

from .whois_lookup import WhoisLookup
from .model import ModelClient
from .reports import ReportStore


@dataclass
class Providers:
    """Collaborator handles injected into analyzers and the web app."""

    lookup: WhoisLookup
    model: ModelClient
    reports: ReportStore


def build_providers() -> Providers:
    """
    Build every collaborator from environment configuration.

    Each client owns its own requests.Session; sessions are not shared
    between collaborators.
    """
    return Providers(
        lookup=WhoisLookup(),
        model=ModelClient(),
        reports=ReportStore(),
    )
