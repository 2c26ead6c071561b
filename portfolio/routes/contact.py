"""Contact endpoints.

GET  /v1/contact/captcha - issue a single-use challenge
POST /v1/contact/verify  - answer it; contact details on success

Contact details are never returned without a correct answer.
"""

from typing import Literal

from fastapi import APIRouter, Query

from portfolio.schemas import CaptchaChallengeResponse, CaptchaVerifyRequest, ContactInfoResponse
from portfolio.services.captcha import issue_captcha, verify_captcha

router = APIRouter()


@router.get("/captcha", response_model=CaptchaChallengeResponse)
async def get_captcha(
    difficulty: Literal["easy", "medium", "hard"] | None = Query(
        default=None,
        description="Challenge tier (defaults to CAPTCHA_DIFFICULTY)",
    ),
) -> CaptchaChallengeResponse:
    issued = await issue_captcha(difficulty)
    return CaptchaChallengeResponse(
        session_id=issued.session_id,
        captcha_text=issued.captcha_text,
        expires_at=issued.expires_at,
    )


@router.post("/verify", response_model=ContactInfoResponse)
async def verify(request: CaptchaVerifyRequest) -> ContactInfoResponse:
    """Verify an answer. The session is consumed either way.

    Raises:
        CaptchaError (400): Unknown/expired session or wrong answer.
    """
    contact_info = await verify_captcha(request.session_id, request.user_input)
    return ContactInfoResponse(contact_info=contact_info)
