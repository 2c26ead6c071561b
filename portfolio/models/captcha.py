"""CAPTCHA session model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CaptchaSession:
    """A single-use challenge issued to one visitor.

    ``text`` is either a short alphanumeric string or an arithmetic
    expression such as ``"3 + 4"``.
    """

    session_id: str
    text: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now

    @property
    def is_arithmetic(self) -> bool:
        return "+" in self.text or "-" in self.text
