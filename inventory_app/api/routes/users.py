from fastapi import APIRouter, Depends
from typing import Optional
from inventory_app.api.deps import get_user_store
from inventory_app.schemas.common import ErrorResponse
from inventory_app.schemas.user import RegisterRequest, SignInRequest, UserResponse
from inventory_app.services.user_store import UserStore

router = APIRouter(prefix="/user", tags=["users"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}}
)
async def register_user(
    payload: Optional[RegisterRequest] = None,
    users: UserStore = Depends(get_user_store)
):
    """Register a new user."""
    payload = payload or RegisterRequest()
    user = users.register(payload.email, payload.password, payload.name)
    return UserResponse.model_validate(user)


@router.post(
    "/signin",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}}
)
async def sign_in(
    payload: Optional[SignInRequest] = None,
    users: UserStore = Depends(get_user_store)
):
    """Sign in with email and password."""
    payload = payload or SignInRequest()
    user = users.sign_in(payload.email, payload.password)
    return UserResponse.model_validate(user)
