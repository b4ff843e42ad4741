URL_PROMPT = """
You are a TrustMona cybersecurity AI.
Analyze the following link and determine if it is a scam.
Return ONLY a JSON object like this:
{{
  "risk_level": "low",
  "risk_score": 0,
  "reasons": ["reason1","reason2"]
}}
Link: {url}
"""

TEXT_PROMPT = """
You are TrustMona AI, specialized in detecting scam messages.
Analyze the following text message.

Look for:
- Fake job offers
- Requests for upfront fees
- WhatsApp / Telegram scams
- Impersonation
- Crypto or investment fraud

Return ONLY valid JSON:
{{
  "risk_level": "low | medium | high",
  "risk_score": 0-100,
  "reasons": ["short reason 1", "short reason 2"]
}}

Message:
\"\"\"{message}\"\"\"
"""


def url_prompt(url: str) -> str:
    return URL_PROMPT.format(url=url)


def text_prompt(message: str) -> str:
    return TEXT_PROMPT.format(message=message)
