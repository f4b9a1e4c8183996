from datetime import datetime, timezone

import pytest

from affiliateos.agent.tools import ToolContext
from affiliateos.agent.tools.alerts import DEFAULT_LINK_PRODUCTS, check_alerts, urgency_rank
from affiliateos.models.tools import URGENCY_LEVELS, AlertsRequest


@pytest.mark.asyncio
async def test_critical_stock_alert_only(tool_context):
    response = await check_alerts(AlertsRequest(alert_type="stock_alerts", urgency="critical"), tool_context)

    assert len(response.alerts) == 1
    alert = response.alerts[0]
    assert alert.alert_type == "stock_shortage"
    assert alert.priority == "critical"
    assert "Only 3 left" in alert.message
    assert alert.affected_products == ["LED Desk Lamp with USB"]
    assert alert.deadline == "2025-11-16"


@pytest.mark.asyncio
@pytest.mark.parametrize("urgency", URGENCY_LEVELS)
async def test_alerts_meet_minimum_urgency(tool_context, urgency):
    response = await check_alerts(AlertsRequest(alert_type="all", urgency=urgency), tool_context)

    assert all(urgency_rank(alert.priority) >= urgency_rank(urgency) for alert in response.alerts)


@pytest.mark.asyncio
async def test_low_urgency_returns_every_category(tool_context):
    response = await check_alerts(AlertsRequest(alert_type="all", urgency="low"), tool_context)

    types = {alert.alert_type for alert in response.alerts}
    assert types == {
        "price_drop", "stock_shortage", "restock", "broken_link", "seasonal_sale", "compliance", "opportunity",
    }


@pytest.mark.asyncio
async def test_product_filter_is_case_insensitive_substring(tool_context):
    request = AlertsRequest(alert_type="price_drops", urgency="low", products=["EARBUDS"])
    response = await check_alerts(request, tool_context)

    assert [alert.affected_products for alert in response.alerts] == [["Wireless Bluetooth Earbuds"]]


@pytest.mark.asyncio
async def test_product_filter_keeps_only_matching_alerts(tool_context):
    request = AlertsRequest(alert_type="all", urgency="low", products=["lamp", "diffuser"])
    response = await check_alerts(request, tool_context)

    assert response.alerts
    for alert in response.alerts:
        assert alert.affected_products is None or any(
            fragment in product.lower() for product in alert.affected_products for fragment in ("lamp", "diffuser")
        )


@pytest.mark.asyncio
async def test_link_status_uses_requested_products(tool_context):
    default = await check_alerts(AlertsRequest(alert_type="link_status"), tool_context)
    custom = await check_alerts(AlertsRequest(alert_type="link_status", products=["Yoga Mat"]), tool_context)

    assert default.alerts[0].affected_products == DEFAULT_LINK_PRODUCTS
    assert custom.alerts[0].affected_products == ["Yoga Mat"]


@pytest.mark.asyncio
async def test_seasonal_alert_follows_calendar_month(tool_context):
    november = await check_alerts(AlertsRequest(alert_type="seasonal_sales", urgency="low"), tool_context)
    assert [alert.title for alert in november.alerts] == ["🛍️ Black Friday Preparation Alert"]

    march = ToolContext(now=lambda: datetime(2025, 3, 10, tzinfo=timezone.utc))
    response = await check_alerts(AlertsRequest(alert_type="seasonal_sales", urgency="low"), march)
    assert response.alerts == []


@pytest.mark.asyncio
async def test_platform_filter_does_not_drop_alerts(tool_context):
    unfiltered = await check_alerts(AlertsRequest(alert_type="all", urgency="high"), tool_context)
    filtered = await check_alerts(AlertsRequest(alert_type="all", urgency="high", platforms=["ebay"]), tool_context)

    assert filtered.alerts == unfiltered.alerts
