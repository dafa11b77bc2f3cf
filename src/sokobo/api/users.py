"""Sessions (register/login/current user) and admin user management."""

from fastapi import APIRouter, Depends, Response

from sokobo.access.gate import AuthenticationError, Principal
from sokobo.api.dependencies import ADMIN_ONLY, authenticated, get_settings, user_service
from sokobo.api.schemas import LoginRequest, RegisterRequest, TokenResponse, UpdateRoleRequest, UserResponse
from sokobo.config import Settings
from sokobo.identity.services import UserService
from sokobo.identity.sessions import issue_token

auth_router = APIRouter(prefix="/api", tags=["auth"])
users_router = APIRouter(prefix="/api/users", tags=["users"])


def _user(user) -> UserResponse:
    return UserResponse.model_validate(user.to_public_dict())


def _token(user, settings: Settings) -> TokenResponse:
    return TokenResponse(access_token=issue_token(user, settings), user=_user(user))


# --- Sessions ---


@auth_router.post("/register", status_code=201, response_model=TokenResponse)
async def register(
    body: RegisterRequest,
    users: UserService = Depends(user_service),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """Create a customer account and sign it in."""
    user = users.register(name=body.name, email=body.email, password=body.password)
    return _token(user, settings)


@auth_router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    users: UserService = Depends(user_service),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    user = users.authenticate(body.email, body.password)
    if user is None:
        raise AuthenticationError("Invalid email or password")
    return _token(user, settings)


@auth_router.post("/logout", status_code=204)
async def logout(principal: Principal = Depends(authenticated)) -> Response:
    # Tokens are stateless; the client drops its copy
    return Response(status_code=204)


@auth_router.get("/user", response_model=UserResponse)
async def current_user(
    principal: Principal = Depends(authenticated),
    users: UserService = Depends(user_service),
) -> UserResponse:
    return _user(users.get(principal.id))


# --- Admin user management ---


@users_router.get("", response_model=list[UserResponse], dependencies=ADMIN_ONLY)
async def list_users(users: UserService = Depends(user_service)) -> list[UserResponse]:
    return [_user(u) for u in users.list_users()]


@users_router.put("/{user_id}/role", response_model=UserResponse, dependencies=ADMIN_ONLY)
async def update_user_role(
    user_id: str,
    body: UpdateRoleRequest,
    users: UserService = Depends(user_service),
) -> UserResponse:
    return _user(users.set_role(user_id, body.role))


@users_router.delete("/{user_id}", status_code=204, dependencies=ADMIN_ONLY)
async def delete_user(user_id: str, users: UserService = Depends(user_service)) -> Response:
    users.delete(user_id)
    return Response(status_code=204)
