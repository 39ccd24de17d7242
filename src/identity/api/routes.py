"""FastAPI endpoints for user registration."""

from fastapi import APIRouter, Body

from identity.api.schemas import CreateUserRequest
from identity.auth import get_identity_service
from identity.registration import CreateUser
from shared.responses import to_response

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/users", status_code=201)
def create_user(body: CreateUserRequest | None = Body(default=None)):
    """Register a new user id with the authentication service."""
    handler = CreateUser(get_identity_service(), body)
    return to_response(handler.handle())
