"""Tests for the CAPTCHA-gated contact endpoints."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from portfolio.services import captcha as captcha_service
from portfolio.services.captcha import RedisCaptchaSessionStore, evaluate_expression


@pytest.mark.asyncio
async def test_issue_and_verify_text_captcha(client: AsyncClient):
    response = await client.get("/v1/contact/captcha")
    assert response.status_code == 200
    challenge = response.json()
    assert set(challenge) == {"sessionId", "captchaText", "expiresAt"}
    assert len(challenge["captchaText"]) == 5

    response = await client.post(
        "/v1/contact/verify",
        json={"sessionId": challenge["sessionId"], "userInput": challenge["captchaText"].upper()},
    )
    assert response.status_code == 200
    assert response.json()["contactInfo"]["email"] == "me@example.com"


@pytest.mark.asyncio
async def test_hard_captcha_accepts_numeric_answer(client: AsyncClient):
    challenge = (await client.get("/v1/contact/captcha", params={"difficulty": "hard"})).json()
    answer = evaluate_expression(challenge["captchaText"])

    response = await client.post(
        "/v1/contact/verify",
        json={"sessionId": challenge["sessionId"], "userInput": str(answer)},
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_wrong_answer_burns_session(client: AsyncClient):
    challenge = (await client.get("/v1/contact/captcha", params={"difficulty": "easy"})).json()

    response = await client.post(
        "/v1/contact/verify",
        json={"sessionId": challenge["sessionId"], "userInput": "wrong!"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "CAPTCHA_FAILED"
    assert "contactInfo" not in body

    response = await client.post(
        "/v1/contact/verify",
        json={"sessionId": challenge["sessionId"], "userInput": challenge["captchaText"]},
    )
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid or expired session"


@pytest.mark.asyncio
async def test_verify_requires_fields(client: AsyncClient):
    response = await client.post("/v1/contact/verify", json={"sessionId": "abc"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_difficulty_default_from_settings(client: AsyncClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CAPTCHA_DIFFICULTY", "easy")
    captcha_service.get_settings.cache_clear()

    challenge = (await client.get("/v1/contact/captcha")).json()
    assert len(challenge["captchaText"]) == 4


@pytest.mark.asyncio
async def test_redis_store_round_trip(monkeypatch: pytest.MonkeyPatch):
    """Redis-backed sessions: TTL on write, GETDEL on read."""
    from portfolio.stores import redis as redis_store

    fake: dict[str, tuple[dict, int]] = {}

    async def fake_set(session_id: str, payload: dict, ttl: int) -> None:
        fake[session_id] = (payload, ttl)

    async def fake_pop(session_id: str) -> dict | None:
        entry = fake.pop(session_id, None)
        return entry[0] if entry else None

    monkeypatch.setattr(redis_store, "set_captcha_session", fake_set)
    monkeypatch.setattr(redis_store, "pop_captcha_session", fake_pop)

    now = datetime(2025, 1, 1, tzinfo=timezone.utc)
    store = RedisCaptchaSessionStore()
    issued = await captcha_service.issue_captcha("medium", store=store, now=now)
    assert fake[issued.session_id][1] == 300

    session = await store.take(issued.session_id, now + timedelta(seconds=10))
    assert session is not None
    assert session.text == issued.captcha_text
    assert await store.take(issued.session_id, now) is None
