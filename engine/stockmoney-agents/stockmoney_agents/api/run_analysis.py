"""
stockmoney_agents.api.run_analysis

Purpose:
    Programmatic entrypoint for the single-stock report: ticker in, StockAnalysisReport out.

Used By:
    - stockmoney_agents.cli.main
    - stockmoney_agents.session.view_state (analyzer view)
    - backend.api.routes.v1.analysis

Design Notes:
    - No stdout printing.
    - Same guard order as screening: credential, then input.
"""

from __future__ import annotations

from typing import Any

from stockmoney_agents.api.requests import PreparedRequest, require_credential, require_input
from stockmoney_agents.contracts.enums import Feature
from stockmoney_agents.contracts.reports import StockAnalysisReport
from stockmoney_agents.credentials.store import CredentialStore
from stockmoney_agents.llm.analysis_prompt import build_analysis_prompt
from stockmoney_agents.llm.client import LLMClient
from stockmoney_agents.schema.response_schemas import ANALYSIS_SCHEMA
from stockmoney_agents.utils.logging import LogCtx, get_logger, with_ctx

logger = get_logger(__name__)


def parse_analysis_payload(payload: Any) -> StockAnalysisReport:
    return StockAnalysisReport.model_validate(payload)


def prepare_analysis(
    ticker: str | None, *, credential_store: CredentialStore
) -> PreparedRequest[StockAnalysisReport]:
    credential = require_credential(credential_store)
    ticker = require_input(ticker, Feature.ANALYSIS).strip()

    return PreparedRequest(
        feature=Feature.ANALYSIS,
        prompt=build_analysis_prompt(ticker),
        schema=ANALYSIS_SCHEMA,
        credential=credential,
        parse=parse_analysis_payload,
    )


def run_analysis(
    *, ticker: str | None, credential_store: CredentialStore, client: LLMClient
) -> StockAnalysisReport:
    """
    Generate the six-section report for one ticker.

    Raises:
        MissingCredential: no API key stored (nothing sent).
        EmptyInput: blank ticker (nothing sent).
        GenerationFailure: remote call, JSON parse, or payload shape failed.
    """
    prepared = prepare_analysis(ticker, credential_store=credential_store)

    lgr = with_ctx(logger, LogCtx(feature=Feature.ANALYSIS.value))
    lgr.info("analysis started ticker=%s", (ticker or "").strip())
    lgr.debug("prompt_chars=%s", len(prepared.prompt))

    report = prepared.execute(client)

    lgr.info(
        "analysis finished periods=%s rating=%s",
        len(report.financial_summary),
        report.risk_analysis.rating,
    )
    return report
