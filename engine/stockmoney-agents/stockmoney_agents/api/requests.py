"""
stockmoney_agents.api.requests

Purpose:
    Shared request plumbing for both features: pre-call guards and a prepared,
    ready-to-send generation request.

Design Notes:
    - Guards run before anything touches the network: credential first, then input.
    - PreparedRequest.execute() is the single blocking remote call; it re-labels every
      failure (client or payload shape) as a GenerationFailure for its feature.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from pydantic import ValidationError

from stockmoney_agents.contracts.enums import Feature
from stockmoney_agents.contracts.errors import EmptyInput, GenerationFailure, MissingCredential
from stockmoney_agents.credentials.store import CredentialStore
from stockmoney_agents.llm.client import LLMClient
from stockmoney_agents.schema.nodes import SchemaNode

T = TypeVar("T")


def require_credential(credential_store: CredentialStore) -> str:
    credential = credential_store.get()
    if not credential or not credential.strip():
        raise MissingCredential("no credential stored")
    return credential.strip()


def require_input(text: str | None, feature: Feature) -> str:
    if text is None or not text.strip():
        raise EmptyInput(feature)
    return text


@dataclass(frozen=True)
class PreparedRequest(Generic[T]):
    feature: Feature
    prompt: str
    schema: SchemaNode
    credential: str = field(repr=False)
    parse: Callable[[Any], T] = field(repr=False)

    def execute(self, client: LLMClient) -> T:
        try:
            payload = client.generate(
                prompt=self.prompt, schema=self.schema, credential=self.credential
            )
        except GenerationFailure as e:
            raise e.for_feature(self.feature) from e
        except Exception as e:
            # Anything else a provider raises is a failed generation.
            raise GenerationFailure(
                f"{self.feature.value} client raised {e.__class__.__name__}: {e}",
                feature=self.feature,
            ) from e

        try:
            return self.parse(payload)
        except (ValidationError, TypeError, AttributeError, KeyError) as e:
            raise GenerationFailure(
                f"{self.feature.value} payload does not match the report contract: {e}",
                feature=self.feature,
            ) from e
