# stockmoney_agents/llm/screening_prompt.py
# Purpose: Fixed-role prompt for quantitative stock screening from free-text criteria.

from __future__ import annotations

SCREENING_PROMPT_TEMPLATE = """你是一位顶级的量化投资分析师。你的任务是根据用户提供的选股标准，精准地筛选出3-5只最符合的A股或美股市场的股票。

**核心任务：** 你的评分逻辑必须严格量化。
1.  **解析数值标准：** 首先，仔细解析用户输入的“选股标准”，识别出所有具体的数值要求，例如“毛利率高于50%”、“市盈率低于30倍”、“市值大于1000亿”等。
2.  **量化匹配与评分：** 你的核心工作是根据这些数值标准来计算综合评分（1-100）。
    -   如果一只股票完美满足或超越了所有数值标准（例如，用户要求毛利率 > 50%，而公司毛利率为65%），它应该获得非常高的基础分（例如85分以上）。
    -   如果只是部分满足或接近标准（例如，用户要求市盈率 < 20，而公司市盈率为22），评分应相应降低。
    -   除了数值标准外，再结合投资论点、竞争优势等定性因素，对基础分进行微调，得出最终的综合评分。
3.  **结果输出：** 对于每一只股票，请提供其公司名称、股票代码、交易所、严格量化后的综合评分、解释其竞争优势的投资论点，以及最新的毛利率和市盈率TTM。

**用户选股标准: "{criteria}"**

请严格按照提供的JSON schema格式返回一个包含推荐股票的数组。所有内容必须使用简体中文。
"""


def build_screening_prompt(criteria: str) -> str:
    """
    Embed raw user criteria into the screening template.

    Callers reject blank criteria before building; this never fails for a string.
    """
    return SCREENING_PROMPT_TEMPLATE.format(criteria=criteria)
