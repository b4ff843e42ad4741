import logging
from typing import Any, Dict, Optional, Tuple

import requests
import tldextract

from trustmona.config import WHOIS_API_KEY, REQUEST_TIMEOUT
from trustmona.providers.base import Provider
from trustmona.types import LookupSource

logger = logging.getLogger(__name__)

WHOISXML_URL = "https://www.whoisxmlapi.com/whoisserver/WhoisService"

# Offline extractor: the bundled public suffix snapshot, no HTTP fetch at runtime
_extract = tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)


def lookup_target(domain: str) -> str:
    """
    Reduce a scanned host to the registrable domain that WHOIS/RDAP know about.

    "www.Example.co.uk:8443" -> "example.co.uk". Hosts without a public suffix
    (IPs, "localhost") are returned as-is.
    """
    host = domain.rsplit("@", 1)[-1].split(":", 1)[0].strip().lower().rstrip(".")
    ext = _extract(host)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return host


class WhoisLookup(Provider):
    """
    Domain registration lookup.

    Sources are tried in order until one yields a creation date:
    WhoisXML API (needs WHOIS_API_KEY), RDAP, then python-whois.
    The returned `data` is {"createdDate": <str | datetime>}.
    """

    name = "whois_lookup"
    timeout = REQUEST_TIMEOUT

    def __init__(self, api_key: Optional[str] = None, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None, use_local_whois: bool = True):
        super().__init__(session=session, timeout=timeout)
        self.api_key = WHOIS_API_KEY if api_key is None else api_key
        self.use_local_whois = use_local_whois

    # ------------------------------------------------------------------
    # WHOISXML API
    # ------------------------------------------------------------------
    def whoisxml_lookup(self, domain: str) -> Tuple[Optional[Any], Optional[str]]:
        """Returns: (creation_date | None, error_message | None)"""
        if not self.api_key:
            return None, "WhoisXML - No API key provided"

        try:
            resp = self.session.get(
                WHOISXML_URL,
                params={"apiKey": self.api_key, "domainName": domain, "outputFormat": "JSON"},
                timeout=self.timeout,
            )

            if resp.status_code != 200:
                return None, f"WhoisXML HTTP {resp.status_code}"

            data = resp.json()
            if "ErrorMessage" in data:
                msg = data["ErrorMessage"].get("msg", "unknown error")
                return None, f"WhoisXML error: {msg}"

            record = data.get("WhoisRecord") or {}
            created = record.get("createdDate") or (record.get("registryData") or {}).get("createdDate")
            if not created:
                return None, "WhoisXML createdDate missing"

            return created, None

        except (requests.RequestException, ValueError, AttributeError) as e:
            return None, f"WhoisXML error: {e}"

    # ------------------------------------------------------------------
    # RDAP FALLBACK
    # ------------------------------------------------------------------
    def rdap_lookup(self, domain: str) -> Tuple[Optional[Any], Optional[str]]:
        try:
            # .be → custom RDAP server
            if domain.endswith(".be"):
                url = f"https://rdap.nic.brussels/domain/{domain}"
            else:
                url = f"https://www.rdap.net/domain/{domain}"

            resp = self.session.get(url, timeout=self.timeout)

            if resp.status_code == 404:
                return None, "RDAP: domain not found"

            if resp.status_code != 200:
                return None, f"RDAP HTTP {resp.status_code}"

            for event in resp.json().get("events", []):
                if event.get("eventAction") == "registration" and event.get("eventDate"):
                    # Example format: "2015-03-26T10:44:09Z"
                    return event["eventDate"], None

            return None, "RDAP registration event missing"

        except (requests.RequestException, ValueError, AttributeError) as e:
            return None, f"RDAP error: {e}"

    # ------------------------------------------------------------------
    # WHOIS FALLBACK
    # ------------------------------------------------------------------
    def fallback_whois(self, domain: str) -> Tuple[Optional[Any], Optional[str]]:
        """Fallback whois check using python-whois."""
        import whois

        try:
            created = whois.whois(domain).creation_date

            if isinstance(created, list):
                created = created[0] if created else None

            if created is None:
                return None, "WHOIS creation_date missing"

            return created, None

        except Exception as e:  # noqa: BLE001
            return None, f"WHOIS error: {e}"

    # ------------------------------------------------------------------
    # MAIN RUN
    # ------------------------------------------------------------------
    def run(self, domain: str) -> Dict[str, Any]:
        target = lookup_target(domain)
        if not target:
            return self.unavailable("empty domain")

        sources = [
            (LookupSource.WHOISXML, self.whoisxml_lookup),
            (LookupSource.RDAP, self.rdap_lookup),
        ]
        if self.use_local_whois:
            sources.append((LookupSource.WHOIS, self.fallback_whois))

        errors = []
        for source, lookup in sources:
            created, err = lookup(target)
            if created is not None:
                logger.debug("creation date for %s from %s: %s", target, source.value, created)
                return self.success({"createdDate": created}, source=source.value)
            errors.append(err)

        reason = "; ".join(e for e in errors if e)
        logger.warning("domain lookup failed for %s (%s)", target, reason)
        return self.unavailable(reason)
