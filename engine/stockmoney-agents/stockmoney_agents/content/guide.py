"""
stockmoney_agents.content.guide

Purpose:
    Static product copy: usage instructions (training view), settings instructions,
    and the footer disclaimer. Served verbatim by the CLI `guide` command and GET /v1/guide.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict

API_KEY_PORTAL_URL = "https://aistudio.google.com/app/apikey"
API_KEY_SAVED_MESSAGE = "API 密钥已成功保存！"

FOOTER_ACCOUNT = "公众号“stock money”"
DISCLAIMER = (
    "免责声明：本应用生成的所有内容均由 AI 模型提供，仅供学习和研究之用，不构成任何投资建议。"
    "请在做出任何投资决策前，进行独立研究并咨询专业人士。"
)


class GuideSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    paragraphs: Tuple[str, ...] = ()
    examples_title: str | None = None
    examples: Tuple[str, ...] = ()
    closing: str | None = None


class Guide(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    sections: Tuple[GuideSection, ...]
    settings_steps: Tuple[str, ...]
    footer: str
    disclaimer: str


USAGE_GUIDE = Guide(
    title="🎓 使用教程",
    sections=(
        GuideSection(
            title="如何使用智能选股助手",
            paragraphs=(
                "在输入框中，用自然语言描述您的选股标准。AI 的理解能力很强，您可以像和投资专家对话一样提问。",
            ),
            examples_title="为了获得最佳结果，请尽量具体：",
            examples=(
                "量化指标： \"毛利率高于60%\"，\"市盈率低于20倍\"，\"连续3年营收增长超过20%\"",
                "定性描述： \"拥有强大的品牌护城河\"，\"处于高增长的赛道\"，\"管理层优秀\"",
                "组合示例： \"筛选出在半导体行业，毛利率高于50%，并且具有技术领先优势的公司。\"",
            ),
        ),
        GuideSection(
            title="如何使用个股深度分析",
            paragraphs=("这是一个更直接的工具。只需在输入框中输入您感兴趣的股票代码即可。",),
            examples_title="支持的市场格式示例：",
            examples=(
                "A股: 600519.SH, 300750.SZ",
                "美股: AAPL, NVDA",
                "港股: 00700.HK",
            ),
            closing="AI 将会生成一份包含公司概况、财务摘要、SWOT分析、投资论点和风险分析的全面报告。",
        ),
    ),
    settings_steps=(
        f"访问 Google AI Studio ({API_KEY_PORTAL_URL}) 并创建一个新的 API 密钥。",
        "将您的密钥复制并粘贴到设置中。",
        "保存密钥。您的密钥只保存在本机，除作为 Gemini 请求的 API Key 外不会被发送到任何地方。",
    ),
    footer=FOOTER_ACCOUNT,
    disclaimer=DISCLAIMER,
)


def format_guide_text(guide: Guide = USAGE_GUIDE) -> list[str]:
    lines = [guide.title, ""]
    for section in guide.sections:
        lines.append(section.title)
        lines.append("-" * len(section.title))
        lines.extend(section.paragraphs)
        if section.examples_title:
            lines.append(section.examples_title)
        lines.extend(f"  • {example}" for example in section.examples)
        if section.closing:
            lines.append(section.closing)
        lines.append("")

    lines.append("🔑 API 密钥设置")
    lines.extend(f"{i}. {step}" for i, step in enumerate(guide.settings_steps, 1))
    lines.append("")
    lines.append(guide.footer)
    lines.append(guide.disclaimer)
    return lines
