"""
Chat Memory Storage for the AffiliateOS agent.

Persists conversation turns per thread so the agent sees recent context.
Supports two backends:
1. In-memory (default, process local)
2. DynamoDB (shared across workers and restarts)
"""

import json
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

import boto3
import structlog
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from affiliateos.settings.agent import AgentConfig
from affiliateos.settings.aws import AWSConfig

logger = structlog.get_logger(__name__)


@dataclass
class ChatMessage:
    """A single chat message."""
    role: str  # "user" or "assistant"
    content: str
    timestamp: float
    resource_id: Optional[str] = None
    tool_calls: Optional[list] = None
    metadata: Optional[dict] = None

    def to_dict(self) -> dict:
        return {
            "role": self.role,
            "content": self.content,
            "timestamp": self.timestamp,
            "resource_id": self.resource_id,
            "tool_calls": self.tool_calls or [],
            "metadata": self.metadata or {},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ChatMessage":
        return cls(
            role=data["role"],
            content=data["content"],
            timestamp=data.get("timestamp", time.time()),
            resource_id=data.get("resource_id"),
            tool_calls=data.get("tool_calls"),
            metadata=data.get("metadata"),
        )


class MemoryBackend(ABC):
    """Abstract base class for memory backends."""

    @abstractmethod
    async def save_message(self, thread_id: str, message: ChatMessage) -> None:
        """Save a message to storage."""

    @abstractmethod
    async def get_history(self, thread_id: str, limit: int = 20) -> list[ChatMessage]:
        """Get the most recent `limit` messages of a thread, oldest first."""

    @abstractmethod
    async def clear_thread(self, thread_id: str) -> None:
        """Clear all messages for a thread."""

    @abstractmethod
    async def get_resource_threads(self, resource_id: str) -> list[str]:
        """List thread IDs that have messages stored for a resource."""


class InMemoryBackend(MemoryBackend):
    """
    Process-local storage, lost on restart.

    Each thread keeps at most `max_messages`; the oldest are dropped on save.
    """

    def __init__(self, max_messages: int = 200):
        self.max_messages = max_messages
        self.threads: dict[str, list[ChatMessage]] = {}

    async def save_message(self, thread_id: str, message: ChatMessage) -> None:
        messages = self.threads.setdefault(thread_id, [])
        messages.append(message)
        del messages[:-self.max_messages]

    async def get_history(self, thread_id: str, limit: int = 20) -> list[ChatMessage]:
        messages = self.threads.get(thread_id, [])
        return messages[-limit:]

    async def clear_thread(self, thread_id: str) -> None:
        self.threads.pop(thread_id, None)

    async def get_resource_threads(self, resource_id: str) -> list[str]:
        return [
            thread_id
            for thread_id, messages in self.threads.items()
            if any(msg.resource_id == resource_id for msg in messages)
        ]


class DynamoDBBackend(MemoryBackend):
    """
    DynamoDB storage for persistent chat history.

    Table Schema:
    - thread_id (PK): String
    - timestamp (SK): Number (milliseconds)
    - resource_id: String (GSI "resource_idx")
    - role: String
    - content: String
    - tool_calls: String (JSON)
    - metadata: String (JSON)
    - ttl: Number (auto-expiry)
    """

    RESOURCE_INDEX = "resource_idx"

    def __init__(self, table_name: str, aws: AWSConfig, ttl_days: int = 30):
        self.table_name = table_name
        self.ttl_days = ttl_days
        self.aws = aws
        self.dynamodb = boto3.resource("dynamodb", **self._client_kwargs())
        self.table = self.dynamodb.Table(table_name)
        self._table_verified = False

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"region_name": self.aws.region_name}
        if self.aws.access_key_id and self.aws.secret_access_key:
            kwargs["aws_access_key_id"] = self.aws.access_key_id
            kwargs["aws_secret_access_key"] = self.aws.secret_access_key
        return kwargs

    async def _ensure_table(self) -> None:
        """Create table if it doesn't exist."""
        if self._table_verified:
            return

        client = boto3.client("dynamodb", **self._client_kwargs())
        try:
            client.describe_table(TableName=self.table_name)
            self._table_verified = True
        except ClientError as e:
            if e.response["Error"]["Code"] != "ResourceNotFoundException":
                raise
            logger.info("Creating memory table", table_name=self.table_name)
            client.create_table(
                TableName=self.table_name,
                KeySchema=[
                    {"AttributeName": "thread_id", "KeyType": "HASH"},
                    {"AttributeName": "timestamp", "KeyType": "RANGE"},
                ],
                AttributeDefinitions=[
                    {"AttributeName": "thread_id", "AttributeType": "S"},
                    {"AttributeName": "timestamp", "AttributeType": "N"},
                    {"AttributeName": "resource_id", "AttributeType": "S"},
                ],
                GlobalSecondaryIndexes=[
                    {
                        "IndexName": self.RESOURCE_INDEX,
                        "KeySchema": [{"AttributeName": "resource_id", "KeyType": "HASH"}],
                        "Projection": {"ProjectionType": "KEYS_ONLY"},
                    }
                ],
                BillingMode="PAY_PER_REQUEST",
            )
            client.get_waiter("table_exists").wait(TableName=self.table_name)
            client.update_time_to_live(
                TableName=self.table_name,
                TimeToLiveSpecification={"Enabled": True, "AttributeName": "ttl"},
            )
            self.table = self.dynamodb.Table(self.table_name)
            self._table_verified = True

    async def save_message(self, thread_id: str, message: ChatMessage) -> None:
        await self._ensure_table()

        item = {
            "thread_id": thread_id,
            "timestamp": int(message.timestamp * 1000),
            "resource_id": message.resource_id or "unknown",
            "role": message.role,
            "content": message.content,
            "tool_calls": json.dumps(message.tool_calls or []),
            "metadata": json.dumps(message.metadata or {}),
            "ttl": int(time.time()) + (self.ttl_days * 86400),
        }
        self.table.put_item(Item=item)

    async def get_history(self, thread_id: str, limit: int = 20) -> list[ChatMessage]:
        await self._ensure_table()

        # Newest first so Limit keeps the tail of the conversation.
        response = self.table.query(
            KeyConditionExpression=Key("thread_id").eq(thread_id),
            ScanIndexForward=False,
            Limit=limit,
        )

        messages = [
            ChatMessage(
                role=item["role"],
                content=item["content"],
                timestamp=int(item["timestamp"]) / 1000,
                resource_id=item.get("resource_id"),
                tool_calls=json.loads(item.get("tool_calls", "[]")),
                metadata=json.loads(item.get("metadata", "{}")),
            )
            for item in response.get("Items", [])
        ]
        messages.reverse()
        return messages

    async def clear_thread(self, thread_id: str) -> None:
        await self._ensure_table()

        response = self.table.query(
            KeyConditionExpression=Key("thread_id").eq(thread_id),
            ProjectionExpression="thread_id, #ts",
            ExpressionAttributeNames={"#ts": "timestamp"},
        )
        with self.table.batch_writer() as batch:
            for item in response.get("Items", []):
                batch.delete_item(Key={"thread_id": item["thread_id"], "timestamp": item["timestamp"]})

    async def get_resource_threads(self, resource_id: str) -> list[str]:
        await self._ensure_table()

        response = self.table.query(
            IndexName=self.RESOURCE_INDEX,
            KeyConditionExpression=Key("resource_id").eq(resource_id),
            ProjectionExpression="thread_id",
        )
        return sorted({item["thread_id"] for item in response.get("Items", [])})


class ChatMemory:
    """
    Main interface for chat memory.

    Usage:
        memory = ChatMemory.from_config(settings.AGENT, settings.AWS)
        await memory.save("telegram/42", "bot", "user", "Hello")
        history = await memory.get_history("telegram/42")
    """

    def __init__(self, backend: MemoryBackend, last_messages: int = 15):
        self._backend = backend
        self.last_messages = last_messages

    @classmethod
    def from_config(cls, agent: AgentConfig, aws: AWSConfig) -> "ChatMemory":
        if agent.MEMORY_BACKEND == "dynamodb":
            backend: MemoryBackend = DynamoDBBackend(
                table_name=agent.TABLE_NAME,
                aws=aws,
                ttl_days=agent.MEMORY_RETENTION_DAYS,
            )
        else:
            backend = InMemoryBackend(max_messages=agent.MEMORY_MAX_STORED_MESSAGES)
        logger.debug("Chat memory initialized", backend=agent.MEMORY_BACKEND)
        return cls(backend, last_messages=agent.MEMORY_LAST_MESSAGES)

    async def save(self, thread_id: str, resource_id: str, role: str, content: str, **kwargs) -> None:
        message = ChatMessage(
            role=role,
            content=content,
            timestamp=time.time(),
            resource_id=resource_id,
            tool_calls=kwargs.get("tool_calls"),
            metadata=kwargs.get("metadata"),
        )
        await self._backend.save_message(thread_id, message)

    async def get_history(self, thread_id: str, limit: Optional[int] = None) -> list[ChatMessage]:
        return await self._backend.get_history(thread_id, limit or self.last_messages)

    async def clear(self, thread_id: str) -> None:
        await self._backend.clear_thread(thread_id)

    async def get_resource_threads(self, resource_id: str) -> list[str]:
        return await self._backend.get_resource_threads(resource_id)

    def format_for_langchain(self, messages: list[ChatMessage]) -> list:
        """Format messages for LangChain."""
        from langchain_core.messages import AIMessage, HumanMessage

        lc_messages = []
        for msg in messages:
            if msg.role == "user":
                lc_messages.append(HumanMessage(content=msg.content))
            elif msg.role == "assistant":
                lc_messages.append(AIMessage(content=msg.content))
        return lc_messages
