"""
Telegram chat workflow.

Two steps, always run in order:
1. use-agent: forward the message and thread to the agent, capture its reply.
   Agent errors propagate to the caller.
2. send-reply: post the reply to the originating chat. Delivery failures are
   logged and reported as `sent=False`, never raised.
"""

from typing import Optional, Protocol

import structlog

from affiliateos.agent.orchestrator import AgentResult
from affiliateos.models.workflow import ChatWorkflowInput, UseAgentOutput, WorkflowResult
from affiliateos.service.telegram import TelegramClient

logger = structlog.get_logger(__name__)

WORKFLOW_ID = "telegram-chatbot-workflow"


class Agent(Protocol):
    async def generate(
        self,
        messages: list,
        resource_id: Optional[str] = None,
        thread_id: Optional[str] = None,
        max_steps: Optional[int] = None,
    ) -> AgentResult: ...


class ChatWorkflow:
    """
    Service wiring the agent to Telegram for one inbound message.

    Holds no per-run state, so one instance serves concurrent chats.
    """

    def __init__(
        self,
        agent: Agent,
        telegram: TelegramClient,
        resource_id: str = "bot",
        max_steps: int = 5,
        parse_mode: Optional[str] = "Markdown",
    ) -> None:
        self.agent = agent
        self.telegram = telegram
        self.resource_id = resource_id
        self.max_steps = max_steps
        self.parse_mode = parse_mode

    async def use_agent(self, message: str, thread_id: str) -> UseAgentOutput:
        log = logger.bind(workflow=WORKFLOW_ID, step="use-agent", thread_id=thread_id)
        log.info("Processing user message through agent")

        result = await self.agent.generate(
            [{"role": "user", "content": message}],
            resource_id=self.resource_id,
            thread_id=thread_id,
            max_steps=self.max_steps,
        )

        log.info("Agent response generated", response_length=len(result.text))
        return UseAgentOutput(response=result.text)

    async def send_reply(self, response: str, chat_id: str, message_id: Optional[str] = None) -> WorkflowResult:
        log = logger.bind(workflow=WORKFLOW_ID, step="send-reply", chat_id=chat_id)
        log.info("Sending response to Telegram")

        try:
            telegram_response = await self.telegram.send_message(
                chat_id=chat_id,
                text=response,
                reply_to_message_id=int(message_id) if message_id else None,
                parse_mode=self.parse_mode,
            )
        except Exception as e:
            log.error("Error sending message", error=str(e), error_type=type(e).__name__)
            return WorkflowResult(sent=False)

        if not telegram_response.is_success:
            log.error(
                "Failed to send message",
                status_code=telegram_response.status_code,
                error=telegram_response.text,
            )
            return WorkflowResult(sent=False)

        log.info("Message sent successfully")
        return WorkflowResult(sent=True)

    async def run(self, workflow_input: ChatWorkflowInput) -> WorkflowResult:
        agent_output = await self.use_agent(workflow_input.message, workflow_input.thread_id)
        return await self.send_reply(agent_output.response, workflow_input.chat_id, workflow_input.message_id)
