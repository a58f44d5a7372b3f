"""
stockmoney_agents.credentials.store

Purpose:
    The single local credential slot (the user's Gemini API key).

Design Notes:
    - CredentialStore is a small Protocol (get/set) injected into whatever issues
      generation requests, so tests can pass InMemoryCredentialStore.
    - FileCredentialStore persists exactly one key-value pair as JSON, keyed by a fixed
      slot name. No encryption, no expiry; `set` overwrites unconditionally.
    - The file is written atomically and restricted to the owner (0600).

Created:
    2026-10-12
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

from stockmoney_agents.config.default_config import DEFAULT_CONFIG
from stockmoney_agents.utils.logging import get_logger

logger = get_logger(__name__)

ENV_CREDENTIAL_FILE = "STOCKMONEY_CREDENTIAL_FILE"

DEFAULT_SLOT = "gemini_api_key"
DEFAULT_CREDENTIAL_DIR = ".stockmoney"
DEFAULT_CREDENTIAL_FILENAME = "credentials.json"


class CredentialStore(Protocol):
    def get(self) -> Optional[str]: ...

    def set(self, value: str) -> None: ...


@dataclass
class InMemoryCredentialStore:
    value: Optional[str] = None

    def get(self) -> Optional[str]:
        return self.value

    def set(self, value: str) -> None:
        self.value = value


@dataclass
class FileCredentialStore:
    path: Path
    slot: str = DEFAULT_SLOT

    def get(self) -> Optional[str]:
        if not self.path.exists():
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            # Unreadable storage is treated like cleared storage; the next set() rewrites it.
            logger.warning("credential file is not valid JSON; ignoring path=%s", self.path)
            return None

        if not isinstance(data, dict):
            return None
        value = data.get(self.slot)
        return value if isinstance(value, str) else None

    def set(self, value: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps({self.slot: value}), encoding="utf-8")
        os.chmod(tmp_path, 0o600)
        os.replace(tmp_path, self.path)
        logger.info("credential saved slot=%s path=%s", self.slot, self.path)


def default_credential_path() -> Path:
    override = (os.getenv(ENV_CREDENTIAL_FILE) or "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_CREDENTIAL_DIR / DEFAULT_CREDENTIAL_FILENAME


def build_credential_store_from_config(config: Mapping[str, Any] | None = None) -> FileCredentialStore:
    """
    File-backed store from config["credentials"]; the env override wins over the default
    path but not over an explicit config path.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    cred_block = cfg.get("credentials") or {}

    path_raw = cred_block.get("file")
    path = Path(path_raw).expanduser() if path_raw else default_credential_path()
    slot = cred_block.get("slot") or DEFAULT_SLOT
    return FileCredentialStore(path=path, slot=slot)
