"""
stockmoney_agents

Schema-constrained Gemini requests for AI stock screening and single-stock reports.
"""

__version__ = "0.1.0"
