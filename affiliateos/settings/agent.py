"""
Agent configuration settings using Pydantic.
"""
from pydantic import BaseModel, Field, field_validator


class AgentConfig(BaseModel):
    NAME: str = Field(
        default="AffiliateOS",
        description="Display name of the conversational agent",
    )
    MODEL: str = Field(
        default="deepseek/deepseek-chat-v3-0324:free",
        description="The chat model used by the agent",
    )
    BASE_URL: str = Field(
        default="https://openrouter.ai/api/v1",
        description="OpenAI-compatible endpoint serving the model",
    )
    OPENAI_API_KEY: str = Field(
        default="dummy-key-for-testing",
        description="API key for the model endpoint",
    )
    MAX_TOKENS: int = Field(
        default=2048,
        description="Maximum tokens per model completion",
    )
    TEMPERATURE: float = Field(
        default=0.7,
        description="Temperature setting for the agent model",
    )
    DEFAULT_RESOURCE_ID: str = Field(
        default="bot",
        description="Resource identifier used when the caller does not provide one",
    )
    MAX_STEPS: int = Field(
        default=5,
        description="Maximum number of model calls per generation, tool rounds included",
    )
    TIMEOUT_SECONDS: float = Field(
        default=120.0,
        description="Upper bound on a single generation, tool calls included",
    )
    MEMORY_BACKEND: str = Field(
        default="in-memory",
        description="Type of memory backend for the agent (in-memory or dynamodb)",
    )
    MEMORY_LAST_MESSAGES: int = Field(
        default=15,
        description="Number of previous messages loaded into each generation",
    )
    MEMORY_MAX_STORED_MESSAGES: int = Field(
        default=200,
        description="Messages kept per thread by the in-memory backend; older ones are dropped",
    )
    MEMORY_RETENTION_DAYS: int = Field(
        default=30,
        description="Number of days to retain memory data",
    )
    TABLE_NAME: str = Field(
        default="affiliateos-agent-memory",
        description="DynamoDB table name for storing agent memory",
    )

    @field_validator("MAX_STEPS", "MEMORY_LAST_MESSAGES", "MEMORY_MAX_STORED_MESSAGES")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v
