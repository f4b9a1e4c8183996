from unittest.mock import AsyncMock

import httpx
import pytest

from affiliateos.agent import AgentResult
from affiliateos.exceptions import AgentGenerationException
from affiliateos.models.workflow import ChatWorkflowInput
from affiliateos.service.telegram import TelegramClient
from affiliateos.service.workflow import ChatWorkflow


def workflow_input(**overrides) -> ChatWorkflowInput:
    data = {"message": "find me products", "threadId": "telegram/42", "chatId": "42", "messageId": "7"}
    data.update(overrides)
    return ChatWorkflowInput.model_validate(data)


def build_workflow(reply: str = "Here you go", status_code: int = 200):
    agent = AsyncMock()
    agent.generate.return_value = AgentResult(text=reply)
    telegram = AsyncMock()
    telegram.send_message.return_value = httpx.Response(status_code, json={"ok": status_code == 200})
    return ChatWorkflow(agent, telegram), agent, telegram


@pytest.mark.asyncio
async def test_reply_is_sent_to_originating_chat():
    workflow, agent, telegram = build_workflow()

    result = await workflow.run(workflow_input())

    assert result.sent is True
    agent.generate.assert_awaited_once_with(
        [{"role": "user", "content": "find me products"}],
        resource_id="bot",
        thread_id="telegram/42",
        max_steps=5,
    )
    telegram.send_message.assert_awaited_once_with(
        chat_id="42",
        text="Here you go",
        reply_to_message_id=7,
        parse_mode="Markdown",
    )


@pytest.mark.asyncio
async def test_send_runs_after_agent_even_for_empty_reply():
    order = []
    workflow, agent, telegram = build_workflow(reply="")
    agent.generate.side_effect = lambda *args, **kwargs: order.append("use-agent") or AgentResult(text="")
    telegram.send_message.side_effect = lambda **kwargs: order.append("send-reply") or httpx.Response(200)

    result = await workflow.run(workflow_input())

    assert order == ["use-agent", "send-reply"]
    assert telegram.send_message.await_args.kwargs["text"] == ""
    assert result.sent is True


@pytest.mark.asyncio
async def test_empty_message_id_is_omitted():
    workflow, _, telegram = build_workflow()

    await workflow.run(workflow_input(messageId=""))

    assert telegram.send_message.await_args.kwargs["reply_to_message_id"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 403, 500])
async def test_non_2xx_reports_not_sent(status_code):
    workflow, _, _ = build_workflow(status_code=status_code)

    result = await workflow.run(workflow_input())

    assert result.sent is False


@pytest.mark.asyncio
async def test_transport_error_reports_not_sent():
    workflow, _, telegram = build_workflow()
    telegram.send_message.side_effect = httpx.ConnectError("unreachable")

    result = await workflow.run(workflow_input())

    assert result.sent is False


@pytest.mark.asyncio
async def test_agent_errors_propagate():
    workflow, agent, telegram = build_workflow()
    agent.generate.side_effect = AgentGenerationException(thread_id="telegram/42")

    with pytest.raises(AgentGenerationException):
        await workflow.run(workflow_input())

    telegram.send_message.assert_not_awaited()


@pytest.mark.asyncio
async def test_any_send_exception_reports_not_sent():
    workflow, _, telegram = build_workflow()
    telegram.send_message.side_effect = RuntimeError("Cannot send a request, as the client has been closed.")

    result = await workflow.run(workflow_input())

    assert result.sent is False


@pytest.mark.asyncio
async def test_closed_telegram_client_reports_not_sent():
    agent = AsyncMock()
    agent.generate.return_value = AgentResult(text="hello")
    telegram = TelegramClient("TOKEN", client=httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200))))
    await telegram.close()

    result = await ChatWorkflow(agent, telegram).run(workflow_input())

    assert result.sent is False
