"""
stockmoney_agents.contracts.errors

Purpose:
    Engine error taxonomy. Every error carries a user-facing message (simplified Chinese,
    shown inline by the UI) separate from the developer-facing exception text.

Notes:
    - MissingCredential / EmptyInput are raised before any remote call is attempted.
    - GenerationFailure wraps transport, HTTP, JSON and payload-shape failures alike.
    - RequestInFlight / RequestDiscarded belong to the per-view state machine.

Created:
    2026-10-12
"""

from __future__ import annotations

from stockmoney_agents.contracts.enums import Feature

MISSING_CREDENTIAL_MESSAGE = "请先在“设置”页面中配置您的 Gemini API Key。"

_EMPTY_INPUT_MESSAGES = {
    Feature.SCREENING: "请输入您的选股标准。",
    Feature.ANALYSIS: "请输入股票代码。",
}

_GENERATION_FAILURE_MESSAGES = {
    Feature.SCREENING: "筛选失败。请检查您的API Key是否有效，调整您的标准或稍后重试。",
    Feature.ANALYSIS: "分析失败。请检查您的API Key是否有效、股票代码是否正确，或稍后重试。",
}

_GENERIC_GENERATION_FAILURE_MESSAGE = "生成失败。请检查您的API Key是否有效，或稍后重试。"


class StockMoneyError(Exception):
    """Base class for expected, user-visible engine errors."""

    user_message: str = "操作失败，请稍后重试。"

    def __init__(self, detail: str | None = None, *, user_message: str | None = None) -> None:
        if user_message is not None:
            self.user_message = user_message
        super().__init__(detail or self.user_message)


class MissingCredential(StockMoneyError):
    user_message = MISSING_CREDENTIAL_MESSAGE


class EmptyInput(StockMoneyError):
    def __init__(self, feature: Feature) -> None:
        self.feature = feature
        super().__init__(
            f"empty input for feature={feature.value}",
            user_message=_EMPTY_INPUT_MESSAGES[feature],
        )


class GenerationFailure(StockMoneyError):
    """
    Remote generation failed: rejected credential, network/HTTP error,
    empty or non-JSON response text, or a payload that does not fit the report models.

    Clients raise it without a feature; the feature runner re-raises it with one so the
    user message matches the action that failed.
    """

    def __init__(self, detail: str, *, feature: Feature | None = None) -> None:
        self.feature = feature
        message = (
            _GENERATION_FAILURE_MESSAGES[feature]
            if feature is not None
            else _GENERIC_GENERATION_FAILURE_MESSAGE
        )
        super().__init__(detail, user_message=message)

    def for_feature(self, feature: Feature) -> "GenerationFailure":
        return GenerationFailure(str(self), feature=feature)


class RequestInFlight(StockMoneyError):
    user_message = "请求正在处理中，请稍候。"

    def __init__(self, view: str) -> None:
        self.view = view
        super().__init__(f"a request is already pending for view={view}")


class RequestDiscarded(StockMoneyError):
    user_message = "页面已关闭，本次结果已被丢弃。"

    def __init__(self, view: str) -> None:
        self.view = view
        super().__init__(f"view={view} was closed while its request was pending")
