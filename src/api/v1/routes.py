"""
API v1 routes.

Defines the verification email endpoint. Responses are always JSON and
always carry permissive CORS headers, because the endpoint is called
directly from the registration page.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.api.dependencies import get_registration_email_service
from src.api.models import ErrorResponse, RegistrationEmailRequest, SendSuccessResponse
from src.domain.registration import SEND_FAILED_MESSAGE, RegistrationEmailService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def _json_response(status_code: int, body: BaseModel) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=CORS_HEADERS)


@router.options("/send-registration-email", include_in_schema=False)
async def send_registration_email_preflight() -> Response:
    """CORS preflight: empty body with the CORS headers."""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post(
    "/send-registration-email",
    response_model=SendSuccessResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed field, mismatch or already verified"},
        404: {"model": ErrorResponse, "description": "Registration not found"},
        429: {"model": ErrorResponse, "description": "Within the resend cooldown window"},
        500: {"model": ErrorResponse, "description": "Database error or failed to send email"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": RegistrationEmailRequest.model_json_schema(by_alias=True),
                },
            },
        },
    },
    summary="Send registration verification email",
    description="Check that the registration exists, matches the supplied email and "
    "token, is not yet verified and is outside the resend cooldown, then email "
    "the verification link.",
)
async def send_registration_email(
    request: Request,
    service: RegistrationEmailService = Depends(get_registration_email_service),
) -> JSONResponse:
    """
    Send the verification email for a pending registration.

    - **name**: Display name used in the greeting
    - **email**: Must equal the email stored on the registration
    - **registrationId**: Registration to verify
    - **verificationToken**: Must equal the token stored on the registration
    """
    try:
        payload = await request.json()
        if not isinstance(payload, dict):
            payload = {}
        outcome = await service.handle(payload)
    except Exception:
        # Internal details are logged only
        logger.exception("Error sending registration email")
        return _json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(error=SEND_FAILED_MESSAGE)
        )

    if outcome.sent:
        return _json_response(status.HTTP_200_OK, SendSuccessResponse())
    return _json_response(outcome.status_code, ErrorResponse(error=outcome.error))
