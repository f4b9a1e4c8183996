import pytest

from affiliateos.agent.tools.product_discovery import PLATFORMS, discover_products, localized_price, round_half_up
from affiliateos.models.tools import ProductDiscoveryRequest
from conftest import FIXED_EPOCH_MS


def test_round_half_up_matches_away_from_banker_rounding():
    assert round_half_up(1312.5) == 1313
    assert round_half_up(37.5) == 38
    assert round_half_up(12.4) == 12


@pytest.mark.parametrize(
    "region,price_range,expected",
    [
        ("global", None, "$25"),
        ("us", "premium", "$38"),
        ("global", "budget", "$18"),
        ("india", None, "₹1875"),
        ("india", "budget", "₹1313"),
    ],
)
def test_localized_price(region, price_range, expected):
    assert localized_price(25, region, price_range) == expected


@pytest.mark.asyncio
async def test_products_rotate_across_platforms(tool_context):
    response = await discover_products(ProductDiscoveryRequest(category="electronics"), tool_context)

    assert len(response.products) == 5
    assert [p.platform for p in response.products] == PLATFORMS[:5]
    first = response.products[0]
    assert first.name == "Wireless Bluetooth Earbuds"
    assert first.affiliate_link == f"https://aff.link/amazon_wireless_bluetooth_earbuds_{FIXED_EPOCH_MS}"
    assert first.commission_estimate == "8-12%"


@pytest.mark.asyncio
async def test_single_platform_request(tool_context):
    request = ProductDiscoveryRequest.model_validate({"category": "fashion", "platform": "myntra"})
    response = await discover_products(request, tool_context)

    assert {p.platform for p in response.products} == {"myntra"}
    assert "High conversion rate on myntra" in response.products[0].reason_for_recommendation


@pytest.mark.asyncio
async def test_india_budget_prices_in_rupees(tool_context):
    request = ProductDiscoveryRequest.model_validate({"category": "electronics", "region": "india", "priceRange": "budget"})
    response = await discover_products(request, tool_context)

    assert response.products[0].price == "₹1313"
    assert all(p.price.startswith("₹") for p in response.products)


@pytest.mark.asyncio
async def test_unknown_category_falls_back_to_electronics(tool_context):
    response = await discover_products(ProductDiscoveryRequest(category="Gardening"), tool_context)

    assert response.products[0].name == "Wireless Bluetooth Earbuds"
    assert {p.category for p in response.products} == {"Gardening"}


@pytest.mark.asyncio
async def test_category_lookup_ignores_case(tool_context):
    response = await discover_products(ProductDiscoveryRequest(category="HEALTH"), tool_context)

    assert response.products[0].name == "Vitamin D3 Supplements"
