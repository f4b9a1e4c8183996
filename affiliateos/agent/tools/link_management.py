"""
Link management tool: builds trackable affiliate and short links.
"""

import structlog

from affiliateos.agent.tools.base import ToolContext, ToolDefinition
from affiliateos.agent.tools.product_discovery import slugify
from affiliateos.models.tools import AffiliateLink, LinkManagementRequest, LinkManagementResponse

logger = structlog.get_logger(__name__)

LINK_HOST = "https://aff.link"


async def create_links(request: LinkManagementRequest, context: ToolContext) -> LinkManagementResponse:
    logger.info(
        "Starting link generation",
        product_name=request.product_name,
        platform=request.platform,
        campaign_name=request.campaign_name,
    )

    tracking_id = f"{request.platform}_{slugify(request.product_name)}_{context.epoch_ms()}"
    base_link = request.original_url or (
        f"https://{request.platform}.com/product/{slugify(request.product_name, separator='-')}"
    )
    affiliate_link = (
        f"{LINK_HOST}/{tracking_id}?ref={request.campaign_name or 'default'}"
        f"&utm_source=affiliate&utm_campaign={request.campaign_name or 'general'}"
    )
    short_link = f"{LINK_HOST}/{request.custom_alias or tracking_id[-8:]}"

    link = AffiliateLink(
        affiliate_link=affiliate_link,
        short_link=short_link,
        tracking_id=tracking_id,
        platform=request.platform,
        status="active",
        created_date=context.date_in(0),
    )

    logger.info("Links generated", tracking_id=tracking_id, destination=base_link)
    return LinkManagementResponse(links=[link])


link_management_tool = ToolDefinition(
    name="link-management-tool",
    description=(
        "Generate and manage affiliate links for products and campaigns. "
        "Creates trackable affiliate links with analytics capabilities."
    ),
    input_model=LinkManagementRequest,
    output_model=LinkManagementResponse,
    handler=create_links,
)
