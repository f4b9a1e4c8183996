"""
AffiliateOS conversational agent.

This package provides the tool-using assistant behind the Telegram bot and
the generate endpoint:
- Discovers products, writes promotional content and builds affiliate links
- Simulates campaign analytics and surfaces alerts
- Remembers recent turns per conversation thread
"""

from affiliateos.agent.orchestrator import AffiliateAgent, AgentResult

__version__ = "0.1.0"

__all__ = [
    "AffiliateAgent",
    "AgentResult",
]
