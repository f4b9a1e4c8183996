"""
Product discovery tool.

Recommends trending affiliate products per category from a fixed catalogue,
spreading them across the requested (or all supported) platforms.
"""

import math
import re

import structlog

from affiliateos.agent.tools.base import ToolContext, ToolDefinition
from affiliateos.models.tools import Product, ProductDiscoveryRequest, ProductDiscoveryResponse

logger = structlog.get_logger(__name__)

PLATFORMS = [
    "amazon", "flipkart", "aliexpress", "ebay", "walmart",
    "myntra", "ajio", "nykaa", "snapdeal", "firstcry", "meesho",
]

# (name, base price in USD, commission range)
PRODUCT_TEMPLATES: dict[str, list[tuple[str, int, str]]] = {
    "electronics": [
        ("Wireless Bluetooth Earbuds", 25, "8-12%"),
        ("Smart Fitness Tracker", 45, "6-10%"),
        ("Portable Phone Charger", 20, "10-15%"),
        ("LED Desk Lamp with USB", 30, "12-18%"),
        ("Bluetooth Speaker", 35, "8-14%"),
    ],
    "fashion": [
        ("Trendy Casual Sneakers", 40, "5-8%"),
        ("Stylish Backpack", 25, "10-15%"),
        ("Summer T-Shirt Collection", 15, "15-20%"),
        ("Denim Jacket", 50, "8-12%"),
        ("Athletic Wear Set", 35, "12-18%"),
    ],
    "home": [
        ("Essential Oil Diffuser", 30, "15-25%"),
        ("Non-Stick Cookware Set", 60, "8-12%"),
        ("Cozy Throw Blanket", 25, "20-30%"),
        ("Smart LED Light Bulbs", 20, "10-15%"),
        ("Bamboo Kitchen Utensils", 18, "25-35%"),
    ],
    "health": [
        ("Vitamin D3 Supplements", 15, "20-30%"),
        ("Yoga Mat with Carrying Strap", 25, "15-25%"),
        ("Resistance Bands Set", 12, "25-40%"),
        ("Protein Powder", 35, "10-15%"),
        ("Meditation Cushion", 28, "20-30%"),
    ],
    "books": [
        ("Self-Help Bestseller", 12, "4-8%"),
        ("Digital Marketing Guide", 20, "6-10%"),
        ("Cookbook Collection", 18, "8-12%"),
        ("Personal Finance Book", 15, "5-9%"),
        ("Productivity Planner", 10, "15-25%"),
    ],
}

INR_PER_USD = 75


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def slugify(name: str, separator: str = "_") -> str:
    return re.sub(r"\s+", separator, name.lower())


def localized_price(base_price: int, region: str, price_range: str | None) -> str:
    price = base_price
    if region == "india":
        price = round_half_up(price * INR_PER_USD)
    if price_range == "budget":
        price = round_half_up(price * 0.7)
    elif price_range == "premium":
        price = round_half_up(price * 1.5)
    return f"₹{price}" if region == "india" else f"${price}"


async def discover_products(request: ProductDiscoveryRequest, context: ToolContext) -> ProductDiscoveryResponse:
    logger.info(
        "Starting product discovery",
        category=request.category,
        platform=request.platform,
        price_range=request.price_range,
        region=request.region,
    )
    platforms = [request.platform] if request.platform else PLATFORMS
    templates = PRODUCT_TEMPLATES.get(request.category.lower(), PRODUCT_TEMPLATES["electronics"])

    products = []
    for i, (name, base_price, commission) in enumerate(templates[:5]):
        platform = platforms[i % len(platforms)]
        products.append(
            Product(
                name=name,
                category=request.category,
                price=localized_price(base_price, request.region, request.price_range),
                commission_estimate=commission,
                reason_for_recommendation=(
                    f"High conversion rate on {platform}, trending in {request.category} "
                    f"category with good profit margins"
                ),
                platform=platform,
                affiliate_link=f"https://aff.link/{platform}_{slugify(name)}_{context.epoch_ms()}",
            )
        )

    logger.info("Product discovery completed", count=len(products))
    return ProductDiscoveryResponse(products=products)


product_discovery_tool = ToolDefinition(
    name="product-discovery-tool",
    description=(
        "Discover trending and high-converting affiliate products from major e-commerce platforms. "
        "Use this when users ask for product recommendations, want to find profitable products to promote, "
        "or need ideas for their affiliate marketing campaigns."
    ),
    input_model=ProductDiscoveryRequest,
    output_model=ProductDiscoveryResponse,
    handler=discover_products,
)
