"""
stockmoney_agents.llm.analysis_prompt

Purpose:
    Prompt for the six-section single-stock report (profile, financial summary,
    SWOT, bull/bear thesis, risk analysis, conclusion).

Notes:
    - The financial-summary ordering (last full fiscal year, then every reported quarter
      of the current year, chronologically) is asked of the model here; the client
      cannot verify it.
"""

from __future__ import annotations

ANALYSIS_PROMPT_TEMPLATE = """你是一位顶级的金融分析师。请为股票代码为 "{ticker}" 的公司生成一份专业的、深度综合分析报告。
报告必须严格按照给定的JSON schema结构和要求输出，内容全面、数据精确、分析深刻。
所有内容必须使用简体中文。

报告需包含以下所有部分：
1.  **公司概况 (companyProfile):** 公司全称、股票代码、交易所、所属行业板块，以及一段详细的公司业务描述。
2.  **财务摘要 (financialSummary):**
    -   **关键要求:** 此项必须为一个数组。你需要提供基于**最新可用财务报告**的数据。
    -   **内容:** 数组应包含**最近一个完整财年**的年度数据，以及**当前年度所有已公布的季度**数据。
    -   **示例:** 如果当前是2025年7月，且公司已发布Q2财报，则数组应包含 "2024年度"、"2025年第一季度" 和 "2025年第二季度" 三个周期的数据。
    -   **字段:** 每个周期对象需包含：周期(period)，营业收入(revenue)，净利润(netProfit)，毛利率(grossMargin)和市盈率(peRatio)，并为每个指标提供数值和一句精炼的点评。
3.  **SWOT分析 (swotAnalysis):** 优势、劣势、机会、威胁各至少3个关键点。
4.  **投资论点 (investmentThesis):** 详细的看涨理由(bull)和看跌理由(bear)。
5.  **风险分析 (riskAnalysis):** 综合风险评级(rating), 风险摘要(summary), 和至少3个主要风险因素(keyFactors)。
6.  **综合结论 (conclusion):** 一段总结性的最终结论。
"""


def build_analysis_prompt(ticker: str) -> str:
    return ANALYSIS_PROMPT_TEMPLATE.format(ticker=ticker)
