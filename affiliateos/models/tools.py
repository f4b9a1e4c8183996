"""
Request/response schemas for the affiliate marketing tools.

Requests use camelCase on the wire (what the model and direct callers send)
and snake_case attributes in Python. Responses are snake_case throughout.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Urgency = Literal["low", "medium", "high", "critical"]

URGENCY_LEVELS: tuple[str, ...] = ("low", "medium", "high", "critical")


class ToolRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# Product discovery


class ProductDiscoveryRequest(ToolRequest):
    category: str = Field(..., description="Product category (e.g., electronics, fashion, home, health, books, etc.)")
    platform: Optional[str] = Field(
        None,
        description=(
            "Specific platform to search (amazon, flipkart, aliexpress, ebay, walmart, myntra, ajio, "
            "nykaa, snapdeal, firstcry, meesho) - leave empty to search all platforms"
        ),
    )
    price_range: Optional[str] = Field(None, description="Price range preference (budget, mid-range, premium)")
    region: str = Field("global", description="Target region for products (us, india, global, etc.)")


class Product(BaseModel):
    name: str
    category: str
    price: str
    commission_estimate: str
    reason_for_recommendation: str
    platform: str
    affiliate_link: str


class ProductDiscoveryResponse(BaseModel):
    products: list[Product]


# Content generation


class ContentGenerationRequest(ToolRequest):
    content_type: Literal["blog", "social", "email", "comparison"] = Field(..., description="Type of content to generate")
    product: str = Field(..., description="Product name or description to create content for")
    affiliate_link: str = Field(..., description="Affiliate link to embed in the content")
    tone: str = Field("professional", description="Content tone (professional, casual, enthusiastic, etc.)")
    target_audience: str = Field("general", description="Target audience (beginners, professionals, parents, students, etc.)")
    key_features: Optional[list[str]] = Field(None, description="Key product features to highlight")
    content_length: Literal["short", "medium", "long"] = Field("medium", description="Desired content length")


class ContentPiece(BaseModel):
    type: str
    text: str
    seo_keywords: Optional[list[str]] = None
    call_to_action: Optional[str] = None


class ContentGenerationResponse(BaseModel):
    content: list[ContentPiece]


# Link management


class LinkManagementRequest(ToolRequest):
    product_name: str = Field(..., description="Name of the product or service")
    platform: str = Field(..., description="Platform/merchant (amazon, flipkart, etc.)")
    original_url: Optional[str] = Field(None, description="Original product URL if available")
    campaign_name: Optional[str] = Field(None, description="Campaign name for tracking")
    custom_alias: Optional[str] = Field(None, description="Custom alias for the link")


class AffiliateLink(BaseModel):
    affiliate_link: str
    short_link: str
    tracking_id: str
    platform: str
    status: str
    created_date: str


class LinkManagementResponse(BaseModel):
    links: list[AffiliateLink]


# Analytics simulation


class AnalyticsRequest(ToolRequest):
    timeframe: Literal["daily", "weekly", "monthly", "yearly"] = Field("weekly", description="Time period for analytics")
    campaign_name: Optional[str] = Field(None, description="Specific campaign to analyze")
    platform: Optional[str] = Field(None, description="Platform to focus analytics on")
    metric_type: Literal["overview", "detailed", "predictive", "comparison"] = Field(
        "overview", description="Type of analytics report"
    )


class Metric(BaseModel):
    metric_name: str
    current_value: str
    previous_value: Optional[str] = None
    trend: str
    benchmark: Optional[str] = None
    insights: str


class AnalyticsResponse(BaseModel):
    analytics: list[Metric]


# Alerts


class AlertsRequest(ToolRequest):
    alert_type: Literal[
        "price_drops", "stock_alerts", "link_status", "seasonal_sales", "compliance", "opportunities", "all"
    ] = Field("all", description="Type of alerts to check")
    urgency: Urgency = Field("medium", description="Minimum urgency level for alerts")
    products: Optional[list[str]] = Field(None, description="Specific products to monitor")
    platforms: Optional[list[str]] = Field(None, description="Specific platforms to monitor")


class Alert(BaseModel):
    alert_type: str
    priority: Urgency
    title: str
    message: str
    action_required: str
    deadline: Optional[str] = None
    affected_products: Optional[list[str]] = None


class AlertsResponse(BaseModel):
    alerts: list[Alert]


# Registry


class ToolInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Tool identifier used for execution")
    description: str = Field(..., description="What the tool does")
    input_schema: dict = Field(..., alias="inputSchema", description="JSON schema of the tool arguments")
