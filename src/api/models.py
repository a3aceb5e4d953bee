"""
API request and response models.

Pydantic models for OpenAPI schema generation and response serialization.
The request body is validated by the domain gate, not by pydantic, so that
malformed fields produce the gate's 400 messages instead of a 422.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegistrationEmailRequest(BaseModel):
    """Request model for sending a registration verification email."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., max_length=200, description="Registrant display name")
    email: str = Field(
        ...,
        max_length=254,
        pattern=r"^[^\s@]+@[^\s@]+\.[^\s@]+$",
        description="Email address stored on the registration",
    )
    registration_id: str = Field(..., alias="registrationId", description="Registration id")
    verification_token: str = Field(
        ..., alias="verificationToken", description="Token issued at registration"
    )


class SendSuccessResponse(BaseModel):
    """Response model for a dispatched email."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
