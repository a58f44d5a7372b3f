"""
CLI entrypoint for stockmoney-agents.

Sub-commands:
    screen   --criteria TEXT   AI stock screening (ranked candidates)
    analyze  --ticker SYMBOL   six-section single-stock report
    set-key  --api-key KEY     save the Gemini API key (overwrites)
    show-key                   show whether a key is saved (masked)
    guide                      usage instructions + disclaimer

Pretty output goes to stdout via oprint(); --output json writes one JSON document.
Diagnostics/trace/debug go to stderr via logging.
"""

from __future__ import annotations

import argparse
import copy
import json
import logging
import sys
from dataclasses import replace
from typing import Any, Sequence

from stockmoney_agents.api.run_analysis import run_analysis
from stockmoney_agents.api.run_screening import run_screening
from stockmoney_agents.cli.logging_setup import setup_cli_logging
from stockmoney_agents.config.default_config import DEFAULT_CONFIG
from stockmoney_agents.content.guide import API_KEY_SAVED_MESSAGE, USAGE_GUIDE, format_guide_text
from stockmoney_agents.contracts.errors import StockMoneyError
from stockmoney_agents.credentials.store import CredentialStore, build_credential_store_from_config
from stockmoney_agents.llm.client import LLMRuntimeConfig, build_llm_client_from_config
from stockmoney_agents.llm.providers import LLMProvider
from stockmoney_agents.render.text import format_analysis_text, format_screening_text
from stockmoney_agents.render.views import render_analysis, render_screening
from stockmoney_agents.utils.logging import mask_secret

logger = logging.getLogger("stockmoney_agents.cli")

EXIT_USER_ERROR = 2


def oprint(*args, **kwargs) -> None:
    """
    User-facing output printer (stdout).
    Use this for --output=pretty so pipes/redirection work as expected.
    """
    try:
        print(*args, file=sys.stdout, flush=True, **kwargs)
    except BrokenPipeError:
        raise SystemExit(0)


def _write_json(payload: Any, indent: int) -> None:
    try:
        sys.stdout.write(json.dumps(payload, indent=indent, ensure_ascii=False, default=str) + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        raise SystemExit(0)


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw}") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {raw}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--output", choices=["pretty", "json"], default="pretty")
    common.add_argument("--json-indent", type=int, default=2)
    common.add_argument("--quiet", action="store_true")
    common.add_argument("--trace", action="store_true")
    common.add_argument("--credential-file", default=None)

    common.add_argument("--llm-provider", choices=[p.value for p in LLMProvider], default=None)
    common.add_argument("--llm-model", default=None)
    common.add_argument("--llm-base-url", default=None)
    common.add_argument("--llm-timeout-s", type=_positive_float, default=None)

    p = argparse.ArgumentParser(prog="stockmoney")
    sub = p.add_subparsers(dest="command", required=True)

    screen = sub.add_parser("screen", parents=[common], help="AI stock screening")
    screen.add_argument("--criteria", required=True)

    analyze = sub.add_parser("analyze", parents=[common], help="single-stock report")
    analyze.add_argument("--ticker", required=True)

    set_key = sub.add_parser("set-key", parents=[common], help="save the Gemini API key")
    set_key.add_argument("--api-key", required=True)

    sub.add_parser("show-key", parents=[common], help="show the saved key (masked)")
    sub.add_parser("guide", parents=[common], help="usage instructions")
    return p


def _runtime_config(args: argparse.Namespace, cfg: dict) -> LLMRuntimeConfig:
    # Precedence: CLI flags > LLM_* env > DEFAULT_CONFIG
    runtime = LLMRuntimeConfig.from_env(cfg)
    if args.llm_provider:
        runtime = replace(runtime, provider=LLMProvider(args.llm_provider))
    if args.llm_model:
        runtime = replace(runtime, model_identifier=args.llm_model)
    if args.llm_base_url:
        runtime = replace(runtime, base_url=args.llm_base_url.rstrip("/"))
    if args.llm_timeout_s is not None:
        runtime = replace(runtime, timeout_seconds=args.llm_timeout_s)
    if args.trace:
        runtime = replace(runtime, trace_enabled=True)
    return runtime


def _cmd_screen(args: argparse.Namespace, store: CredentialStore, cfg: dict) -> None:
    client = build_llm_client_from_config(_runtime_config(args, cfg))
    stocks = run_screening(criteria=args.criteria, credential_store=store, client=client)
    view = render_screening(stocks)

    if args.output == "json":
        _write_json(
            {
                "criteria": args.criteria,
                "results": [s.model_dump(by_alias=True, mode="json") for s in stocks],
                "view": view.model_dump(mode="json"),
            },
            args.json_indent,
        )
        return

    for line in format_screening_text(view):
        oprint(line)


def _cmd_analyze(args: argparse.Namespace, store: CredentialStore, cfg: dict) -> None:
    client = build_llm_client_from_config(_runtime_config(args, cfg))
    report = run_analysis(ticker=args.ticker, credential_store=store, client=client)
    view = render_analysis(report)

    if args.output == "json":
        _write_json(
            {
                "ticker": args.ticker.strip(),
                "report": report.model_dump(by_alias=True, mode="json"),
                "view": view.model_dump(mode="json"),
            },
            args.json_indent,
        )
        return

    for line in format_analysis_text(view):
        oprint(line)


def _cmd_set_key(args: argparse.Namespace, store: CredentialStore) -> None:
    store.set(args.api_key)
    if args.output == "json":
        _write_json({"saved": True, "masked": mask_secret(args.api_key)}, args.json_indent)
    else:
        oprint(API_KEY_SAVED_MESSAGE)


def _cmd_show_key(args: argparse.Namespace, store: CredentialStore) -> None:
    key = store.get()
    configured = bool(key and key.strip())
    if args.output == "json":
        _write_json({"configured": configured, "masked": mask_secret(key)}, args.json_indent)
    elif configured:
        oprint(f"Gemini API Key: {mask_secret(key)}")
    else:
        oprint("未配置 Gemini API Key。")


def _cmd_guide(args: argparse.Namespace) -> None:
    if args.output == "json":
        _write_json(USAGE_GUIDE.model_dump(mode="json"), args.json_indent)
        return
    for line in format_guide_text():
        oprint(line)


def main(argv: Sequence[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    # Note: quiet is handled by logging_setup module (stderr only).
    setup_cli_logging(trace=args.trace, quiet=args.quiet)

    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if args.credential_file:
        cfg.setdefault("credentials", {})["file"] = args.credential_file
    store = build_credential_store_from_config(cfg)

    try:
        if args.command == "screen":
            _cmd_screen(args, store, cfg)
        elif args.command == "analyze":
            _cmd_analyze(args, store, cfg)
        elif args.command == "set-key":
            _cmd_set_key(args, store)
        elif args.command == "show-key":
            _cmd_show_key(args, store)
        else:
            _cmd_guide(args)
    except StockMoneyError as e:
        # Clean CLI failure (no traceback) for expected user/remote errors.
        logger.error(e.user_message)
        logger.debug("%s: %s", e.__class__.__name__, e)
        raise SystemExit(EXIT_USER_ERROR)
    except ValueError as e:
        # Invalid LLM_* / flag configuration.
        logger.error(str(e))
        raise SystemExit(EXIT_USER_ERROR)


if __name__ == "__main__":
    main()
