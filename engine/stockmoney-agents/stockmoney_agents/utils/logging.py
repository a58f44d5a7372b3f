# stockmoney_agents/utils/logging.py
# Purpose: Shared logging helpers (logger factory + adapters) for stockmoney-agents.
# Notes: CLI / API own handler/format/level. This module must never print.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping


# Stable logger name prefix so users can filter and grep easily.
LOGGER_NAMESPACE = "stockmoney_agents"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a namespaced logger. Does NOT configure handlers/levels.
    """
    if not name:
        return logging.getLogger(LOGGER_NAMESPACE)

    # e.g. "stockmoney_agents.session.view_state"
    if name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(name)

    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Prefix log messages with stable key=value context (view=..., feature=..., provider=...).
    """

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        super().__init__(logger, dict(extra or {}))

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra") or {}
        merged = {**self.extra, **extra}

        if merged:
            ctx = " ".join(f"{k}={merged[k]}" for k in sorted(merged.keys()) if merged[k] is not None)
            if ctx:
                msg = f"{ctx} | {msg}"

        kwargs["extra"] = {}
        return msg, kwargs


@dataclass(frozen=True)
class LogCtx:
    """
    Common context fields. Never put the credential or a full prompt here.
    """
    view: str | None = None
    feature: str | None = None
    provider: str | None = None
    model: str | None = None

    def as_extra(self) -> dict[str, Any]:
        return {
            "view": self.view,
            "feature": self.feature,
            "provider": self.provider,
            "model": self.model,
        }


def with_ctx(logger: logging.Logger, ctx: LogCtx | Mapping[str, Any] | None = None) -> ContextLoggerAdapter:
    if ctx is None:
        return ContextLoggerAdapter(logger, {})
    if isinstance(ctx, LogCtx):
        return ContextLoggerAdapter(logger, ctx.as_extra())
    return ContextLoggerAdapter(logger, dict(ctx))


def mask_secret(secret: str | None, *, keep: int = 4) -> str:
    """
    Mask a secret for display/logging: 'AIzaSyA...xyz9' -> 'AIza****xyz9'.
    Short secrets are fully masked.
    """
    if not secret:
        return ""
    if len(secret) <= keep * 2:
        return "*" * len(secret)
    return f"{secret[:keep]}****{secret[-keep:]}"
