from typing import Dict, Any, Optional

import requests


class Provider:
    """
    Base class for outbound collaborators (lookup, model, persistence).

    Attributes:
        name:     unique identifier used in logs and results
        timeout:  per-call timeout in seconds
        session:  requests.Session, injectable so tests can substitute a fake
    """

    name = "base"
    timeout = 10.0

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        if timeout is not None:
            self.timeout = timeout

    # -------------------------------------------------------
    # Output helpers: standardized result conventions
    # -------------------------------------------------------

    def success(self, data: Any, source: Optional[str] = None) -> Dict[str, Any]:
        """Provider answered. `data` is the raw payload the normalizer reads."""
        return {"data": data, "source": source or self.name, "ok": True, "reason": None}

    def unavailable(self, reason: str) -> Dict[str, Any]:
        """
        The provider cannot answer (no API key, network error, HTTP error,
        malformed payload...).

        This is never raised to the caller: the normalizer turns it into a
        degraded signal.
        """
        return {"data": None, "source": self.name, "ok": False, "reason": reason}

    # -------------------------------------------------------

    def run(self, target: str) -> Dict[str, Any]:
        """
        MUST be overridden by each scan provider.

        Returns success(...) or unavailable(...); never raises for upstream failures.
        """
        raise NotImplementedError()
