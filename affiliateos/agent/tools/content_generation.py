"""
Content generation tool.

Renders promotional copy (SEO blog, social posts, email, comparison) from
fixed templates. Every piece embeds the caller's affiliate link verbatim.
"""

import re

import structlog

from affiliateos.agent.tools.base import ToolContext, ToolDefinition
from affiliateos.models.tools import ContentGenerationRequest, ContentGenerationResponse, ContentPiece

logger = structlog.get_logger(__name__)

DEFAULT_BLOG_FEATURES = [
    "High-quality construction and materials",
    "User-friendly design",
    "Excellent value for money",
    "Positive customer reviews",
    "Reliable performance",
]
DEFAULT_SOCIAL_FEATURES = ["High quality", "Great value", "Highly recommended"]
DEFAULT_EMAIL_FEATURES = [
    "Excellent build quality",
    "Easy to use right out of the box",
    "Great value for the price",
    "Reliable performance",
]
DEFAULT_COMPARISON_FEATURES = [
    "Superior quality and durability",
    "Competitive pricing",
    "Excellent customer support",
    "User-friendly design",
    "Proven track record",
]


def bullet_list(features: list[str], bullet: str = "-") -> str:
    return "\n".join(f"{bullet} {feature}" for feature in features)


def hashtag(product: str) -> str:
    return re.sub(r"\s+", "", product)


def render_blog(request: ContentGenerationRequest) -> ContentPiece:
    product = request.product
    features = request.key_features if request.key_features is not None else DEFAULT_BLOG_FEATURES
    detailed_analysis = ""
    if request.content_length == "long":
        detailed_analysis = f"""## Detailed Analysis

Our team spent weeks testing {product} to bring you this honest review. We evaluated it across multiple criteria including build quality, ease of use, value for money, and customer satisfaction.

### Performance Testing Results
The performance metrics speak for themselves. {product} consistently delivered results that exceeded our expectations, making it a reliable choice for both beginners and experienced users.

### Customer Feedback Summary
Based on hundreds of customer reviews, {product} maintains an impressive satisfaction rate, with users particularly praising its reliability and ease of use."""

    text = f"""# The Ultimate {product} Review: Is It Worth Your Investment?

Are you considering purchasing {product}? You're in the right place! In this comprehensive review, we'll dive deep into everything you need to know about {product} to help you make an informed decision.

## What Makes {product} Stand Out?

{bullet_list(features)}

## Why We Recommend {product}

After thorough testing and research, {product} has proven to be an excellent choice for {request.target_audience}. The combination of quality, functionality, and affordability makes it a standout option in its category.

{detailed_analysis}

## Ready to Get Started?

If you're ready to experience the benefits of {product} for yourself, you can [get {product} here]({request.affiliate_link}) with our special recommendation.

*Note: This post contains affiliate links. If you purchase through our links, we may earn a small commission at no extra cost to you. This helps support our content creation efforts.*"""

    lowered = product.lower()
    return ContentPiece(
        type="blog",
        text=text,
        seo_keywords=[
            lowered,
            f"{lowered} review",
            f"best {lowered}",
            f"{lowered} benefits",
            "affiliate marketing",
        ],
        call_to_action=f"Get {product} now with our special link!",
    )


def render_social(request: ContentGenerationRequest) -> list[ContentPiece]:
    product = request.product
    features = request.key_features[:3] if request.key_features is not None else DEFAULT_SOCIAL_FEATURES
    highlights = "✨ " + "\n✨ ".join(features)
    tag = hashtag(product)
    return [
        ContentPiece(
            type="social",
            text=f"""🔥 Just discovered an amazing {product}!

{highlights}

Perfect for {request.target_audience}! Check it out here: {request.affiliate_link}

#affiliate #{tag} #recommendation""",
            call_to_action="Swipe up to learn more!",
        ),
        ContentPiece(
            type="social",
            text=f"""💡 Looking for the perfect {product}? I've got you covered!

After trying dozens of options, this one stands out for its quality and value. {request.target_audience} love it!

Get yours: {request.affiliate_link}

What are you waiting for? 🛒

#productreview #{tag} #mustbuy""",
            call_to_action="Click the link in our bio!",
        ),
    ]


def render_email(request: ContentGenerationRequest) -> ContentPiece:
    product = request.product
    features = request.key_features if request.key_features is not None else DEFAULT_EMAIL_FEATURES
    text = f"""Subject: You Asked About {product} - Here's My Honest Review

Hi there!

You recently asked me about {product}, and I promised to share my thoughts once I had a chance to try it out.

Well, I've been using it for the past few weeks, and I have to say - I'm impressed!

Here's what I love about it:
{bullet_list(features, bullet="•")}

It's particularly great for {request.target_audience} because it's designed with your needs in mind.

If you're interested in checking it out, you can find it here: {request.affiliate_link}

I think you'll love it as much as I do!

Best regards,
[Your Name]

P.S. I only recommend products I genuinely believe in. This link is an affiliate link, which means I may earn a small commission if you decide to purchase. This doesn't affect the price you pay, and it helps me continue providing valuable recommendations."""
    return ContentPiece(
        type="email",
        text=text,
        call_to_action=f"Click here to get your {product} today!",
    )


def render_comparison(request: ContentGenerationRequest) -> ContentPiece:
    product = request.product
    features = request.key_features if request.key_features is not None else DEFAULT_COMPARISON_FEATURES
    text = f"""# {product} vs. The Competition: An Honest Comparison

Choosing the right product can be overwhelming with so many options available. That's why we've put together this comprehensive comparison to help you make the best decision.

## How {product} Stacks Up

### ✅ Advantages of {product}
{bullet_list(features)}

### 📊 Comparison Summary

| Feature | {product} | Competitor A | Competitor B |
|---------|------------|--------------|--------------|
| Quality | ⭐⭐⭐⭐⭐ | ⭐⭐⭐⭐ | ⭐⭐⭐ |
| Price | ⭐⭐⭐⭐⭐ | ⭐⭐⭐ | ⭐⭐⭐⭐ |
| Ease of Use | ⭐⭐⭐⭐⭐ | ⭐⭐⭐⭐ | ⭐⭐⭐ |
| Support | ⭐⭐⭐⭐⭐ | ⭐⭐⭐ | ⭐⭐⭐⭐ |

## Our Recommendation

Based on our thorough analysis, {product} offers the best combination of quality, value, and user experience for {request.target_audience}.

Ready to make your choice? [Get {product} here]({request.affiliate_link}) and experience the difference for yourself.

*Disclosure: This comparison includes affiliate links. We may earn a commission from qualifying purchases, which helps support our independent testing and reviews.*"""
    return ContentPiece(
        type="comparison",
        text=text,
        seo_keywords=[f"{product} comparison", f"{product} vs", "best choice", "product review"],
        call_to_action=f"Choose {product} - the clear winner!",
    )


async def generate_content(request: ContentGenerationRequest, context: ToolContext) -> ContentGenerationResponse:
    logger.info(
        "Starting content generation",
        content_type=request.content_type,
        product=request.product,
        tone=request.tone,
        target_audience=request.target_audience,
        content_length=request.content_length,
    )

    if request.content_type == "blog":
        content = [render_blog(request)]
    elif request.content_type == "social":
        content = render_social(request)
    elif request.content_type == "email":
        content = [render_email(request)]
    else:
        content = [render_comparison(request)]

    logger.info("Content generation completed", pieces=len(content))
    return ContentGenerationResponse(content=content)


content_generation_tool = ToolDefinition(
    name="content-generation-tool",
    description=(
        "Generate promotional content for affiliate marketing including SEO blogs, product comparisons, "
        "social media posts, and email snippets. Always embeds affiliate links naturally within the content."
    ),
    input_model=ContentGenerationRequest,
    output_model=ContentGenerationResponse,
    handler=generate_content,
)
