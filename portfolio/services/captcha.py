"""CAPTCHA service gating the contact details.

Flow:
1. issue_captcha(): new single-use session (5 minute expiry by default)
2. verify_captcha(): consume the session, check the answer, return contact info

Sessions are consumed on the first verification attempt whether the answer
is right or wrong. The default backend is a process-scoped map; set
CAPTCHA_BACKEND=redis to share sessions across replicas.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
import logging
import random
import re
from typing import Any, Literal, Protocol
import uuid

from portfolio.errors import CaptchaError
from portfolio.models import CaptchaSession
from portfolio.settings import get_settings
from portfolio.stores import redis as redis_store
from portfolio.stores.json_file import read_json_object
from portfolio.stores.memory import ExpiringMap

logger = logging.getLogger("uvicorn.error")

Difficulty = Literal["easy", "medium", "hard"]

# No 0/O, 1/I/l, i/o lookalikes
CAPTCHA_CHARS = "ABCDEFGHJKMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz23456789"
CAPTCHA_OPERATORS = "+-"

_TEXT_LENGTHS = {"easy": 4, "medium": 5}
_EXPRESSION_RE = re.compile(r"^\s*(-?\d+)\s*([+-])\s*(-?\d+)\s*$")

_rng = random.SystemRandom()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================
# Challenge generation / checking
# ============================================================


def generate_captcha_text(difficulty: Difficulty = "medium", rng: random.Random | None = None) -> str:
    """Generate challenge text.

    easy/medium: 4/5 random characters. hard: "a + b" or "a - b", operands 1..10.
    """
    rng = rng or _rng
    if difficulty == "hard":
        a = rng.randint(1, 10)
        b = rng.randint(1, 10)
        return f"{a} {rng.choice(CAPTCHA_OPERATORS)} {b}"
    length = _TEXT_LENGTHS.get(difficulty, _TEXT_LENGTHS["medium"])
    return "".join(rng.choice(CAPTCHA_CHARS) for _ in range(length))


def evaluate_expression(expression: str) -> int | None:
    """Evaluate a two-operand ``+``/``-`` expression. None if malformed."""
    match = _EXPRESSION_RE.match(expression)
    if not match:
        return None
    a, op, b = int(match.group(1)), match.group(2), int(match.group(3))
    return a + b if op == "+" else a - b


def check_answer(session: CaptchaSession, answer: str) -> bool:
    """Numeric comparison for arithmetic challenges, case-insensitive otherwise."""
    if session.is_arithmetic:
        expected = evaluate_expression(session.text)
        try:
            given = int(answer.strip())
        except ValueError:
            return False
        return expected is not None and given == expected
    return answer.strip().lower() == session.text.lower()


# ============================================================
# Session stores
# ============================================================


class CaptchaSessionStore(Protocol):
    async def save(self, session: CaptchaSession, now: datetime) -> None: ...

    async def take(self, session_id: str, now: datetime) -> CaptchaSession | None: ...


class MemoryCaptchaSessionStore:
    """In-process sessions; expired entries are purged on every call."""

    def __init__(self) -> None:
        self.sessions: ExpiringMap[CaptchaSession] = ExpiringMap()

    async def save(self, session: CaptchaSession, now: datetime) -> None:
        self.sessions.purge_expired(now)
        self.sessions.set(session.session_id, session, session.expires_at)

    async def take(self, session_id: str, now: datetime) -> CaptchaSession | None:
        self.sessions.purge_expired(now)
        return self.sessions.pop(session_id)


class RedisCaptchaSessionStore:
    """Sessions as Redis keys with TTL; GETDEL makes them single use."""

    async def save(self, session: CaptchaSession, now: datetime) -> None:
        ttl = max(1, int((session.expires_at - now).total_seconds()))
        await redis_store.set_captcha_session(
            session.session_id,
            {"text": session.text, "expires_at": session.expires_at.isoformat()},
            ttl,
        )

    async def take(self, session_id: str, now: datetime) -> CaptchaSession | None:
        payload = await redis_store.pop_captcha_session(session_id)
        if not payload:
            return None
        session = CaptchaSession(
            session_id=session_id,
            text=payload["text"],
            expires_at=datetime.fromisoformat(payload["expires_at"]),
        )
        # Redis TTL has second granularity; re-check the exact expiry.
        return None if session.is_expired(now) else session


@lru_cache
def get_captcha_store() -> CaptchaSessionStore:
    """Get the process-wide CAPTCHA session store for the configured backend."""
    if get_settings().captcha_backend == "redis":
        return RedisCaptchaSessionStore()
    return MemoryCaptchaSessionStore()


# ============================================================
# Operations
# ============================================================


@dataclass(frozen=True)
class IssuedCaptcha:
    session_id: str
    captcha_text: str
    expires_at: datetime


async def issue_captcha(
    difficulty: Difficulty | None = None,
    *,
    store: CaptchaSessionStore | None = None,
    now: datetime | None = None,
) -> IssuedCaptcha:
    """Issue a new challenge and record its session."""
    settings = get_settings()
    store = store or get_captcha_store()
    now = now or _utc_now()

    session = CaptchaSession(
        session_id=uuid.uuid4().hex,
        text=generate_captcha_text(difficulty or settings.captcha_difficulty),
        expires_at=now + timedelta(seconds=settings.captcha_ttl_seconds),
    )
    await store.save(session, now)
    return IssuedCaptcha(
        session_id=session.session_id,
        captcha_text=session.text,
        expires_at=session.expires_at,
    )


async def verify_captcha(
    session_id: str,
    answer: str,
    *,
    store: CaptchaSessionStore | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Consume a session and return contact info if the answer is right.

    Raises:
        CaptchaError: Unknown/expired session or wrong answer.
    """
    store = store or get_captcha_store()
    now = now or _utc_now()

    session = await store.take(session_id, now)
    if session is None:
        logger.warning("CAPTCHA verify: invalid or expired session")
        raise CaptchaError("Invalid or expired session")

    if not check_answer(session, answer):
        logger.warning("CAPTCHA verify: incorrect solution")
        raise CaptchaError("Incorrect CAPTCHA solution")

    return load_contact_info()


def load_contact_info() -> dict[str, Any]:
    """Read the static contact payload from the contact config file."""
    return read_json_object(get_settings().contact_file)
