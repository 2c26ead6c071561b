"""Schemas for the contact endpoints (/v1/contact)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class CaptchaChallengeResponse(BaseModel):
    """Response payload for GET /v1/contact/captcha."""

    session_id: str = Field(alias="sessionId")
    captcha_text: str = Field(alias="captchaText")
    expires_at: datetime = Field(alias="expiresAt")

    model_config = {"populate_by_name": True}


class CaptchaVerifyRequest(BaseModel):
    """Request body for POST /v1/contact/verify."""

    session_id: str = Field(alias="sessionId", min_length=1, max_length=100)
    user_input: str = Field(alias="userInput", min_length=1, max_length=50)

    model_config = {"populate_by_name": True}


class ContactInfoResponse(BaseModel):
    """Contact details, released only after a correct answer."""

    contact_info: dict[str, Any] = Field(alias="contactInfo")

    model_config = {"populate_by_name": True}
