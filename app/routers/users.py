# =============================================================================
# app/routers/users.py - User JSON Endpoints
# =============================================================================
# Shows the ways of producing JSON responses:
# - a plain dict (GET /users, GET /user)
# - a Pydantic model (GET /users2)
# - binding a request body and echoing it back (POST /users)
# =============================================================================

from fastapi import APIRouter, Body

from core.models import MessageResponse, SignupRequest, User

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/users")
async def get_users():
    """Return a hardcoded user built from a dict."""
    return {"id": 1, "name": "john"}


@router.get("/user")
async def get_user():
    """Return a hardcoded user built from a dict."""
    return {"id": 1, "name": "John"}


@router.get("/users2", response_model=User)
async def get_user_model():
    """Return a hardcoded user built from the User model."""
    return User(id=2, name="john 2")


@router.post(
    "/users",
    response_model=SignupRequest,
    responses={400: {"model": MessageResponse, "description": "Invalid request payload"}},
)
async def create_user(signup: SignupRequest | None = Body(default=None)):
    """
    Echo a signup payload.

    The body is decoded into SignupRequest and returned as-is. Missing or
    null fields decode as empty, and an empty or `null` body decodes as
    an empty request. An empty `name` is left out of the response.

    A body that is not valid JSON or has wrong value types is answered
    with 400 `{"message": "invalid request payload"}`.
    """
    if signup is None:
        signup = SignupRequest()
    return signup
