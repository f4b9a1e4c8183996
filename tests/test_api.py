from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from affiliateos.agent import AgentResult
from affiliateos.agent.memory import ChatMessage
from affiliateos.app import create_app
from affiliateos.dependencies.agent import get_agent, get_memory
from affiliateos.dependencies.telegram import get_telegram_client, get_workflow
from affiliateos.dependencies.tools import get_tool_executor
from affiliateos.models.workflow import ChatWorkflowInput, WorkflowResult
from affiliateos.settings import Settings

WEBHOOK_SECRET = "s3cr3t"


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.chdir(tmp_path)
    return Settings(ENVIRONMENT="TEST", TELEGRAM={"BOT_TOKEN": "TOKEN", "WEBHOOK_SECRET": WEBHOOK_SECRET})


@pytest.fixture
def agent():
    agent = AsyncMock()
    agent.generate.return_value = AgentResult(text="Try the LED Desk Lamp.", steps=1)
    return agent


@pytest.fixture
def telegram():
    return AsyncMock()


@pytest.fixture
def workflow():
    workflow = AsyncMock()
    workflow.run.return_value = WorkflowResult(sent=True)
    return workflow


@pytest.fixture
def client(settings, agent, telegram, workflow, memory, executor):
    app = create_app(settings)
    app.dependency_overrides[get_agent] = lambda: agent
    app.dependency_overrides[get_memory] = lambda: memory
    app.dependency_overrides[get_telegram_client] = lambda: telegram
    app.dependency_overrides[get_workflow] = lambda: workflow
    app.dependency_overrides[get_tool_executor] = lambda: executor
    # No context manager: the lifespan would build real collaborators.
    return TestClient(app)


def test_root_and_health(client):
    assert client.get("/").json() == {"app": "AffiliateOS", "version": "0.1.0", "environment": "TEST"}
    response = client.get("/health")
    assert response.json() == {"status": "healthy"}
    assert response.headers["X-Request-ID"]


# Generate


def test_generate_applies_defaults(client, agent):
    response = client.post("/api/agents/affiliateOSAgent/generate", json={"messages": [{"role": "user", "content": "hi"}]})

    assert response.status_code == 200
    assert response.json() == {"text": "Try the LED Desk Lamp."}
    kwargs = agent.generate.await_args.kwargs
    assert kwargs["resource_id"] == "bot"
    assert kwargs["thread_id"].startswith("telegram/default-")
    assert kwargs["max_steps"] == 5


def test_generate_options_override_top_level(client, agent):
    body = {
        "messages": [{"role": "user", "content": "hi"}],
        "resourceId": "web",
        "threadId": "t-1",
        "maxSteps": 2,
        "options": {"threadId": "t-override", "maxSteps": 4},
    }

    client.post("/api/agents/affiliateOSAgent/generate", json=body)

    kwargs = agent.generate.await_args.kwargs
    assert kwargs == {"resource_id": "web", "thread_id": "t-override", "max_steps": 4}


def test_generate_failure_returns_fixed_error(client, agent):
    agent.generate.side_effect = RuntimeError("model exploded")

    response = client.post("/api/agents/affiliateOSAgent/generate", json={"messages": []})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate response"}


def test_generate_rejects_malformed_body(client):
    response = client.post("/api/agents/affiliateOSAgent/generate", json={"messages": [{"role": "robot", "content": "x"}]})

    assert response.status_code == 422
    assert response.json()["title"] == "Validation Error"


# Memory


def test_history_and_clear(client, memory):
    memory._backend.threads["telegram/5"] = [
        ChatMessage(role="user", content="hello", timestamp=1.0, resource_id="bot"),
        ChatMessage(role="assistant", content="hi there", timestamp=2.0, resource_id="bot"),
    ]

    history = client.get("/api/agents/affiliateOSAgent/history", params={"threadId": "telegram/5"}).json()
    assert history["thread_id"] == "telegram/5"
    assert [item["message"] for item in history["items"]] == ["hello", "hi there"]

    threads = client.get("/api/agents/affiliateOSAgent/resources/bot/threads").json()
    assert threads == {"resource_id": "bot", "threads": ["telegram/5"]}

    response = client.delete("/api/agents/affiliateOSAgent/history", params={"threadId": "telegram/5"})
    assert response.status_code == 204
    assert client.get("/api/agents/affiliateOSAgent/history", params={"threadId": "telegram/5"}).json()["items"] == []


def test_history_requires_thread_id(client):
    assert client.get("/api/agents/affiliateOSAgent/history").status_code == 422


# Telegram webhook


def telegram_update(text="hello bot", chat_id=42, message_id=7) -> dict:
    message = {"message_id": message_id, "chat": {"id": chat_id, "type": "private"}, "date": 1700000000}
    if text is not None:
        message["text"] = text
    return {"update_id": 1, "message": message}


def post_update(client, update, secret=WEBHOOK_SECRET):
    headers = {"X-Telegram-Bot-Api-Secret-Token": secret} if secret else {}
    return client.post("/webhooks/telegram", json=update, headers=headers)


def test_webhook_runs_workflow(client, telegram, workflow):
    response = post_update(client, telegram_update())

    assert response.status_code == 200
    assert response.json() == {"ok": True, "skipped": False, "sent": True}
    telegram.send_chat_action.assert_awaited_once_with(42, "typing")
    workflow.run.assert_awaited_once_with(
        ChatWorkflowInput(message="hello bot", thread_id="telegram/42", chat_id="42", message_id="7")
    )


def test_webhook_skips_updates_without_text(client, workflow):
    response = post_update(client, telegram_update(text=None))

    assert response.json() == {"ok": True, "skipped": True}
    workflow.run.assert_not_awaited()


def test_webhook_reports_delivery_failure(client, workflow):
    workflow.run.return_value = WorkflowResult(sent=False)

    assert post_update(client, telegram_update()).json()["sent"] is False


def test_typing_failure_does_not_block_reply(client, telegram, workflow):
    telegram.send_chat_action.side_effect = httpx.ConnectError("unreachable")

    response = post_update(client, telegram_update())

    assert response.status_code == 200
    workflow.run.assert_awaited_once()


@pytest.mark.parametrize("secret", ["wrong", None])
def test_webhook_rejects_bad_secret(client, workflow, secret):
    response = post_update(client, telegram_update(), secret=secret)

    assert response.status_code == 403
    assert response.json()["errors"][0]["type"] == "UNAUTHORIZED_OPERATION"
    workflow.run.assert_not_awaited()


# Tools


def test_list_tools(client):
    body = client.get("/api/tools").json()

    assert body["total_count"] == 5
    assert body["data"][0]["name"] == "product-discovery-tool"
    assert "priceRange" in body["data"][0]["inputSchema"]["properties"]


def test_execute_tool(client):
    response = client.post("/api/tools/alerts-tool/execute", json={"alertType": "stock_alerts", "urgency": "critical"})

    assert response.status_code == 200
    assert [alert["title"] for alert in response.json()["alerts"]] == ["⚠️ Critical Stock Alert"]


def test_execute_unknown_tool(client):
    response = client.post("/api/tools/price-scraper/execute", json={})

    assert response.status_code == 404
    assert response.json()["errors"][0]["type"] == "RESOURCE_NOT_FOUND"


def test_execute_with_invalid_arguments(client):
    response = client.post("/api/tools/content-generation-tool/execute", json={"contentType": "podcast"})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "contentType"


def test_webhook_secret_comes_from_app_settings(settings, telegram, workflow):
    app = create_app(settings)
    app.dependency_overrides[get_telegram_client] = lambda: telegram
    app.dependency_overrides[get_workflow] = lambda: workflow

    response = post_update(TestClient(app), telegram_update(), secret=None)

    assert response.status_code == 403
    workflow.run.assert_not_awaited()


def test_typing_action_error_of_any_kind_is_ignored(client, telegram, workflow):
    telegram.send_chat_action.side_effect = RuntimeError("client closed")

    response = post_update(client, telegram_update())

    assert response.status_code == 200
    assert response.json()["sent"] is True
