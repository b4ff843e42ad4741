import logging
from typing import Any, Dict, Optional

import requests

from trustmona.config import OPENAI_API_KEY, OPENAI_BASE_URL, OPENAI_MODEL, MODEL_TIMEOUT
from trustmona.providers.base import Provider

logger = logging.getLogger(__name__)


class ModelClient(Provider):
    """
    Text-completion client for an OpenAI-compatible /chat/completions endpoint.

    `run(prompt)` returns the assistant's text in `data`, untouched. Parsing
    that text is the normalizer's job.
    """

    name = "model"
    timeout = MODEL_TIMEOUT

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 model: Optional[str] = None, temperature: float = 0.0,
                 session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        super().__init__(session=session, timeout=timeout)
        self.api_key = OPENAI_API_KEY if api_key is None else api_key
        self.base_url = (base_url or OPENAI_BASE_URL).rstrip("/")
        self.model = model or OPENAI_MODEL
        self.temperature = temperature

    def run(self, prompt: str) -> Dict[str, Any]:
        if not self.api_key:
            return self.unavailable("model - No API key provided")

        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            resp = self.session.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )

            if resp.status_code != 200:
                detail = resp.text[:200] if resp.text else "Unknown error"
                logger.warning("model API HTTP %s: %s", resp.status_code, detail)
                return self.unavailable(f"model HTTP {resp.status_code}")

            content = resp.json()["choices"][0]["message"]["content"]
            if not isinstance(content, str):
                return self.unavailable("model returned no text content")

            return self.success(content.strip())

        except requests.RequestException as e:
            logger.warning("model API request failed: %s", e)
            return self.unavailable(f"model error: {e}")

        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning("model API returned an unexpected payload: %s", e)
            return self.unavailable(f"model payload error: {e}")
