import os
from dotenv import load_dotenv
import yaml
from pathlib import Path

CONFIG_FILE = Path(__file__).parent / "config.yaml"

def load_config():
    if CONFIG_FILE.exists():
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}

CONFIG = load_config()

def get_weight(category: str, name: str, default: float = 0.0) -> float:
    """Return weight from YAML or fallback to default."""
    key = getattr(category, "value", category)
    return CONFIG.get(key, {}).get(name, default)


# ENV variable
load_dotenv()

# Model inference (OpenAI-compatible chat completions)
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

# Domain registration lookup
WHOIS_API_KEY = os.getenv("WHOIS_API_KEY", "")

# Feedback persistence (Supabase / PostgREST)
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")

# General Settings
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
MODEL_TIMEOUT = float(os.getenv("MODEL_TIMEOUT", "30"))
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
