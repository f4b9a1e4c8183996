import json

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage, ToolMessage

from affiliateos.agent import AffiliateAgent
from affiliateos.exceptions import AgentGenerationException, AgentTimeoutException
from affiliateos.settings.agent import AgentConfig
from conftest import StubChatModel, tool_call


def build_agent(agent_config, memory, executor, llm) -> AffiliateAgent:
    return AffiliateAgent(agent_config, memory, executor=executor, llm=llm)


def test_binds_every_tool(agent_config, memory, executor):
    llm = StubChatModel([AIMessage(content="hi")])
    build_agent(agent_config, memory, executor, llm)

    assert [tool["function"]["name"] for tool in llm.bound_tools] == [t.name for t in executor.list_tools()]


@pytest.mark.asyncio
async def test_plain_reply_takes_one_step(agent_config, memory, executor):
    llm = StubChatModel([AIMessage(content="Hello creator!")])
    agent = build_agent(agent_config, memory, executor, llm)

    result = await agent.generate([{"role": "user", "content": "hi"}], thread_id="telegram/1")

    assert result.text == "Hello creator!"
    assert result.steps == 1
    assert result.tools_used == []
    prompt = llm.prompts[0]
    assert isinstance(prompt[0], SystemMessage)
    assert isinstance(prompt[-1], HumanMessage) and prompt[-1].content == "hi"


@pytest.mark.asyncio
async def test_tool_results_are_fed_back(agent_config, memory, executor):
    llm = StubChatModel([
        tool_call("alerts-tool", {"alertType": "stock_alerts", "urgency": "critical"}),
        AIMessage(content="One critical stock alert."),
    ])
    agent = build_agent(agent_config, memory, executor, llm)

    result = await agent.generate([{"role": "user", "content": "any alerts?"}])

    assert result.text == "One critical stock alert."
    assert result.steps == 2
    assert result.tools_used == ["alerts-tool"]
    tool_message = llm.prompts[1][-1]
    assert isinstance(tool_message, ToolMessage)
    assert tool_message.tool_call_id == "call_1"
    assert json.loads(tool_message.content)["alerts"][0]["priority"] == "critical"


@pytest.mark.asyncio
async def test_step_budget_bounds_model_calls(agent_config, memory, executor):
    looping = AIMessage(
        content="Still working",
        tool_calls=[{"name": "analytics-simulation-tool", "args": {}, "id": "call_x"}],
    )
    llm = StubChatModel([looping])
    agent = build_agent(agent_config, memory, executor, llm)

    result = await agent.generate([{"role": "user", "content": "stats"}], max_steps=3)

    assert len(llm.prompts) == 3
    assert result.steps == 3
    assert result.tools_used == ["analytics-simulation-tool", "analytics-simulation-tool"]
    assert result.text == "Still working"


@pytest.mark.asyncio
async def test_tool_errors_are_reported_to_the_model(agent_config, memory, executor):
    llm = StubChatModel([
        tool_call("content-generation-tool", {"contentType": "podcast"}),
        tool_call("missing-tool", {}, call_id="call_2"),
        AIMessage(content="Sorry about that."),
    ])
    agent = build_agent(agent_config, memory, executor, llm)

    result = await agent.generate([{"role": "user", "content": "write"}])

    assert result.text == "Sorry about that."
    assert "error" in json.loads(llm.prompts[1][-1].content)
    assert "not found" in json.loads(llm.prompts[2][-1].content)["error"]


@pytest.mark.asyncio
async def test_memory_round_trip(agent_config, memory, executor):
    llm = StubChatModel([AIMessage(content="First answer"), AIMessage(content="Second answer")])
    agent = build_agent(agent_config, memory, executor, llm)

    await agent.generate([{"role": "user", "content": "first question"}], thread_id="telegram/9")
    await agent.generate([{"role": "user", "content": "second question"}], thread_id="telegram/9")

    second_prompt = [m.content for m in llm.prompts[1][1:]]
    assert second_prompt == ["first question", "First answer", "second question"]

    history = await memory.get_history("telegram/9")
    assert [(m.role, m.content) for m in history] == [
        ("user", "first question"),
        ("assistant", "First answer"),
        ("user", "second question"),
        ("assistant", "Second answer"),
    ]
    assert history[-1].metadata == {"model_used": "test-model", "steps": 1}
    assert await memory.get_resource_threads("bot") == ["telegram/9"]


@pytest.mark.asyncio
async def test_history_is_limited_to_last_messages(agent_config, executor):
    from affiliateos.agent.memory import ChatMemory, InMemoryBackend

    memory = ChatMemory(InMemoryBackend(), last_messages=2)
    for i in range(5):
        await memory.save("t", "bot", "user", f"message {i}")
    llm = StubChatModel([AIMessage(content="ok")])
    agent = build_agent(agent_config, memory, executor, llm)

    await agent.generate([{"role": "user", "content": "latest"}], thread_id="t")

    assert [m.content for m in llm.prompts[0][1:]] == ["message 3", "message 4", "latest"]


@pytest.mark.asyncio
async def test_without_thread_nothing_is_saved(agent_config, memory, executor):
    llm = StubChatModel([AIMessage(content="ok")])
    agent = build_agent(agent_config, memory, executor, llm)

    await agent.generate([{"role": "user", "content": "hi"}])

    assert await memory.get_resource_threads("bot") == []


@pytest.mark.asyncio
async def test_timeout(memory, executor):
    config = AgentConfig(TIMEOUT_SECONDS=0.05)
    llm = StubChatModel([AIMessage(content="late")], delay=1.0)
    agent = build_agent(config, memory, executor, llm)

    with pytest.raises(AgentTimeoutException):
        await agent.generate([{"role": "user", "content": "hi"}], thread_id="t")


@pytest.mark.asyncio
async def test_model_failure_is_wrapped(agent_config, memory, executor):
    class FailingModel(StubChatModel):
        async def ainvoke(self, messages):
            raise ConnectionError("endpoint down")

    agent = build_agent(agent_config, memory, executor, FailingModel([]))

    with pytest.raises(AgentGenerationException) as exc_info:
        await agent.generate([{"role": "user", "content": "hi"}])

    assert "endpoint down" in exc_info.value.message
