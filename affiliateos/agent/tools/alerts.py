"""
Alerts tool.

Reports price drops, stock changes, broken links, seasonal sales,
compliance reminders and opportunities. An alert is returned only when its
priority is at least the requested urgency; an optional product filter keeps
alerts whose affected products match any requested name fragment.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from affiliateos.agent.tools.base import ToolContext, ToolDefinition
from affiliateos.models.tools import URGENCY_LEVELS, Alert, AlertsRequest, AlertsResponse

logger = structlog.get_logger(__name__)

DEFAULT_LINK_PRODUCTS = ["Trendy Casual Sneakers", "Stylish Backpack", "Summer T-Shirt Collection"]


@dataclass(frozen=True)
class AlertTemplate:
    alert_type: str
    priority: str
    title: str
    message: str
    action_required: str
    deadline_days: int
    affected_products: Optional[tuple[str, ...]] = None

    def render(self, context: ToolContext, affected_products: Optional[list[str]] = None) -> Alert:
        products = affected_products
        if products is None and self.affected_products is not None:
            products = list(self.affected_products)
        return Alert(
            alert_type=self.alert_type,
            priority=self.priority,
            title=self.title,
            message=self.message,
            action_required=self.action_required,
            deadline=context.date_in(self.deadline_days),
            affected_products=products,
        )


PRICE_DROP_ALERTS = [
    AlertTemplate(
        "price_drop", "high", "🔥 Major Price Drop Alert!",
        "Wireless Bluetooth Earbuds dropped from $49.99 to $29.99 (40% off) on Amazon. High conversion opportunity!",
        "Update affiliate links and create urgent promotional content",
        2, ("Wireless Bluetooth Earbuds",),
    ),
    AlertTemplate(
        "price_drop", "medium", "💰 Price Reduction Detected",
        "Smart Fitness Tracker now 25% off on Flipkart. Good time to push this product.",
        "Consider increasing promotion budget for this item",
        5, ("Smart Fitness Tracker",),
    ),
]

STOCK_ALERTS = [
    AlertTemplate(
        "stock_shortage", "critical", "⚠️ Critical Stock Alert",
        "LED Desk Lamp with USB showing 'Only 3 left in stock' on Amazon. High-performing product running low!",
        "Immediate action: Create scarcity-based content and increase promotion",
        1, ("LED Desk Lamp with USB",),
    ),
    AlertTemplate(
        "restock", "medium", "📦 Restock Notification",
        "Essential Oil Diffuser back in stock on multiple platforms after 2 weeks shortage.",
        "Resume promotional campaigns for this product",
        3, ("Essential Oil Diffuser",),
    ),
]

BROKEN_LINK_ALERT = AlertTemplate(
    "broken_link", "high", "🔗 Broken Link Detected",
    "3 affiliate links for eBay products are returning 404 errors. Revenue impact detected.",
    "Update or replace broken links immediately",
    1, tuple(DEFAULT_LINK_PRODUCTS),
)

# Keyed by calendar month (1-12).
SEASONAL_ALERTS = {
    11: AlertTemplate(
        "seasonal_sale", "critical", "🛍️ Black Friday Preparation Alert",
        "Black Friday is in 3 weeks! Major sales starting soon across all platforms.",
        "Prepare Black Friday content calendar and increase affiliate link updates",
        21, ("All categories",),
    ),
    8: AlertTemplate(
        "seasonal_sale", "high", "🎒 Back-to-School Season",
        "Back-to-school sales active! Electronics, books, and school supplies seeing high demand.",
        "Focus content on student-targeted products",
        30, ("Electronics", "Books", "Productivity Planner"),
    ),
    12: AlertTemplate(
        "seasonal_sale", "high", "🎄 Holiday Shopping Peak",
        "Holiday shopping season in full swing. Gift-focused products performing exceptionally well.",
        "Create gift guide content and emphasize delivery deadlines",
        15, ("All gift categories",),
    ),
}

COMPLIANCE_ALERTS = [
    AlertTemplate(
        "compliance", "medium", "📋 FTC Disclosure Reminder",
        "Monthly reminder: Ensure all affiliate content includes proper FTC disclosure statements.",
        "Review recent content for compliance and update disclosure language",
        7, ("All content",),
    ),
    AlertTemplate(
        "compliance", "low", "📊 Performance Report Due",
        "Quarterly affiliate performance review due for tax reporting purposes.",
        "Compile earnings reports from all platforms",
        14, ("All campaigns",),
    ),
]

OPPORTUNITY_ALERTS = [
    AlertTemplate(
        "opportunity", "high", "🚀 Trending Product Alert",
        "AI-powered home devices trending 300% this week. Low competition, high search volume!",
        "Research and create content for AI home device category",
        7, ("Smart home category",),
    ),
    AlertTemplate(
        "opportunity", "medium", "💡 New Niche Opportunity",
        "Sustainable/eco-friendly products showing increased demand. Consider expanding into this niche.",
        "Evaluate eco-friendly product opportunities on your platforms",
        14, ("Eco-friendly category",),
    ),
    AlertTemplate(
        "opportunity", "medium", "📈 Commission Rate Increase",
        "Amazon increased commission rates for health & wellness category from 4% to 6%.",
        "Increase focus on health & wellness promotions to maximize earnings",
        10, ("Health & wellness category",),
    ),
]


def urgency_rank(level: str) -> int:
    return URGENCY_LEVELS.index(level)


def meets_urgency(alert: Alert, urgency: str) -> bool:
    return urgency_rank(alert.priority) >= urgency_rank(urgency)


def matches_products(alert: Alert, products: list[str]) -> bool:
    """True when the alert has no affected products or one contains a requested fragment."""
    if not alert.affected_products:
        return True
    fragments = [p.lower() for p in products]
    return any(fragment in affected.lower() for affected in alert.affected_products for fragment in fragments)


def candidate_alerts(request: AlertsRequest, context: ToolContext) -> list[Alert]:
    wanted = request.alert_type
    alerts: list[Alert] = []

    if wanted in ("price_drops", "all"):
        alerts.extend(t.render(context) for t in PRICE_DROP_ALERTS)
    if wanted in ("stock_alerts", "all"):
        alerts.extend(t.render(context) for t in STOCK_ALERTS)
    if wanted in ("link_status", "all"):
        alerts.append(BROKEN_LINK_ALERT.render(context, affected_products=request.products))
    if wanted in ("seasonal_sales", "all"):
        seasonal = SEASONAL_ALERTS.get(context.now().month)
        if seasonal is not None:
            alerts.append(seasonal.render(context))
    if wanted in ("compliance", "all"):
        alerts.extend(t.render(context) for t in COMPLIANCE_ALERTS)
    if wanted in ("opportunities", "all"):
        alerts.extend(t.render(context) for t in OPPORTUNITY_ALERTS)

    return alerts


async def check_alerts(request: AlertsRequest, context: ToolContext) -> AlertsResponse:
    logger.info(
        "Starting alerts check",
        alert_type=request.alert_type,
        urgency=request.urgency,
        products=request.products,
        platforms=request.platforms,
    )

    alerts = [alert for alert in candidate_alerts(request, context) if meets_urgency(alert, request.urgency)]

    # Platform monitoring is informational only; no alert carries a platform.
    if request.platforms:
        logger.info("Platform filter requested", platforms=request.platforms)

    if request.products:
        alerts = [alert for alert in alerts if matches_products(alert, request.products)]

    logger.info("Alert check completed", count=len(alerts))
    return AlertsResponse(alerts=alerts)


alerts_tool = ToolDefinition(
    name="alerts-tool",
    description=(
        "Monitor and generate alerts for price drops, stock shortages, broken links, seasonal sales, "
        "and compliance reminders. Keeps affiliates informed of important opportunities and issues."
    ),
    input_model=AlertsRequest,
    output_model=AlertsResponse,
    handler=check_alerts,
)
