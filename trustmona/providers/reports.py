from typing import Any, Dict, List, Optional

import requests

from trustmona.config import SUPABASE_URL, SUPABASE_ANON_KEY, REQUEST_TIMEOUT
from trustmona.providers.base import Provider


class ReportStoreError(Exception):
    """The feedback report could not be persisted."""


class ReportStore(Provider):
    """
    Insert-only client for the Supabase `reports` table (PostgREST API).

    Unlike the scan providers, failures here are raised: a feedback write has
    no fallback value.
    """

    name = "reports"
    timeout = REQUEST_TIMEOUT
    table = "reports"

    def __init__(self, url: Optional[str] = None, api_key: Optional[str] = None,
                 session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        super().__init__(session=session, timeout=timeout)
        self.url = (SUPABASE_URL if url is None else url).rstrip("/")
        self.api_key = SUPABASE_ANON_KEY if api_key is None else api_key

    def insert(self, record: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Insert one row and return the stored representation."""
        if not self.url or not self.api_key:
            raise ReportStoreError("Supabase URL or key not configured")

        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }

        try:
            resp = self.session.post(
                f"{self.url}/rest/v1/{self.table}",
                json=[record],
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ReportStoreError(f"Supabase request failed: {e}") from e

        if resp.status_code not in (200, 201):
            raise ReportStoreError(f"Supabase HTTP {resp.status_code}: {resp.text[:200]}")

        try:
            return resp.json()
        except ValueError:
            # PostgREST may answer 201 with an empty body
            return []
