# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the payloads used by the JSON examples:
# - User: Hardcoded user returned by GET /users2
# - SignupRequest: Body of POST /users, echoed back to the caller
# - MessageResponse: Error body for every error response
#
# None of these are stored anywhere. They are built per request and
# discarded once the response is written.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_serializer


class User(BaseModel):
    """
    A user record.

    Only ever used as a literal response payload.

    Example:
        {"id": 2, "name": "john 2"}
    """

    id: int = Field(..., description="Numeric user identifier")
    name: str = Field(..., description="Display name")


class SignupRequest(BaseModel):
    """
    Schema for the signup payload accepted by POST /users.

    Both fields default to empty and JSON null decodes to empty, so only
    a wrong value type fails decoding. `name` is left out of the encoded
    payload when empty; `email` is always present. `{"email": "a@b.com"}`
    round-trips unchanged.

    Example:
        {
            "name": "Jane",
            "email": "jane@example.com"
        }
    """

    name: str = Field(
        default="",
        description="Optional display name (omitted from responses when empty)"
    )
    email: str = Field(
        default="",
        description="Email address (always present in responses)"
    )

    @field_validator("name", "email", mode="before")
    @classmethod
    def null_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @model_serializer(mode="wrap")
    def omit_empty_name(self, handler):
        data = handler(self)
        if not data.get("name"):
            data.pop("name", None)
        return data


class MessageResponse(BaseModel):
    """Error body: `{"message": "..."}`."""
    message: str
