"""
stockmoney_agents.api.run_screening

Purpose:
    Programmatic entrypoint for AI stock screening: criteria in, ranked ScreenedStock list out.
    Shared execution path for the CLI, the per-view state machine and the HTTP API.

Design Notes:
    - No stdout printing (callers decide how to present results).
    - Raises MissingCredential / EmptyInput before any remote call, GenerationFailure after.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from pydantic import TypeAdapter

from stockmoney_agents.api.requests import PreparedRequest, require_credential, require_input
from stockmoney_agents.contracts.enums import Feature
from stockmoney_agents.contracts.reports import ScreenedStock
from stockmoney_agents.credentials.store import CredentialStore
from stockmoney_agents.llm.client import LLMClient
from stockmoney_agents.llm.screening_prompt import build_screening_prompt
from stockmoney_agents.schema.response_schemas import SCREENER_SCHEMA
from stockmoney_agents.utils.logging import LogCtx, get_logger, with_ctx

logger = get_logger(__name__)

_SCREENED_STOCKS = TypeAdapter(List[ScreenedStock])


def rank_by_score(stocks: Iterable[ScreenedStock]) -> List[ScreenedStock]:
    """Highest score first; equal scores keep their input order."""
    return sorted(stocks, key=lambda stock: stock.score, reverse=True)


def parse_screening_payload(payload: Any) -> List[ScreenedStock]:
    return rank_by_score(_SCREENED_STOCKS.validate_python(payload))


def prepare_screening(
    criteria: str | None, *, credential_store: CredentialStore
) -> PreparedRequest[List[ScreenedStock]]:
    credential = require_credential(credential_store)
    criteria = require_input(criteria, Feature.SCREENING)

    return PreparedRequest(
        feature=Feature.SCREENING,
        prompt=build_screening_prompt(criteria),
        schema=SCREENER_SCHEMA,
        credential=credential,
        parse=parse_screening_payload,
    )


def run_screening(
    *, criteria: str | None, credential_store: CredentialStore, client: LLMClient
) -> List[ScreenedStock]:
    """
    Screen stocks for free-text criteria.

    Raises:
        MissingCredential: no API key stored (nothing sent).
        EmptyInput: blank criteria (nothing sent).
        GenerationFailure: remote call, JSON parse, or payload shape failed.
    """
    prepared = prepare_screening(criteria, credential_store=credential_store)

    lgr = with_ctx(logger, LogCtx(feature=Feature.SCREENING.value))
    lgr.info("screening started criteria_chars=%s", len(criteria or ""))
    lgr.debug("prompt_chars=%s", len(prepared.prompt))

    stocks = prepared.execute(client)

    lgr.info("screening finished candidates=%s", len(stocks))
    return stocks
