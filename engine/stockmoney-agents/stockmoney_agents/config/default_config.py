"""
Default configuration for stockmoney-agents.

This file acts as the system control plane:
- which LLM provider / model answers generation requests
- where the single local credential slot lives

Callers READ from this config (deep-copy before overriding) but never mutate it.
"""

DEFAULT_CONFIG = {
    # ------------------------------------------------------------------
    # Generation client
    # ------------------------------------------------------------------
    "llm": {
        "provider": "gemini",  # gemini | genai | mock | stub
        "model": "gemini-2.5-flash",
        "base_url": "https://generativelanguage.googleapis.com",
        # None = transport default with no deadline; a hung request blocks its view.
        "timeout_s": None,
        "trace": False,
    },
    # ------------------------------------------------------------------
    # Local credential storage (one key-value pair, never transmitted
    # anywhere except as the Gemini API key header)
    # ------------------------------------------------------------------
    "credentials": {
        "slot": "gemini_api_key",
        # None = ~/.stockmoney/credentials.json (or $STOCKMONEY_CREDENTIAL_FILE)
        "file": None,
    },
}
