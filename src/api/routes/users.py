"""User account routes (register, login, profile)."""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_password_hasher, get_token_service, get_user_repo
from api.models import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
    UserProfile,
)
from api.security import get_current_user_required
from port.user_repository import UserRepository
from services import account_service
from services.password_hasher import PasswordHasher
from services.token_service import TokenService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """Register a new user and return a token for it.

    409 EMAIL_ALREADY_EXISTS if the email is taken, 400 on invalid input.
    """
    result = account_service.register(
        repo, hasher, tokens,
        name=request.name,
        email=request.email,
        password=request.password,
        phone=request.phone,
        address=request.address,
    )
    return AuthResponse(token=result.token, user=UserProfile(**result.user))


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """Login user and return JWT token. 401 INVALID_CREDENTIALS on any mismatch."""
    result = account_service.login(repo, hasher, tokens, email=request.email, password=request.password)
    return AuthResponse(token=result.token, user=UserProfile(**result.user))


@router.get("/me", response_model=UserProfile)
def get_me(
    current_user: UserProfile = Depends(get_current_user_required),
    repo: UserRepository = Depends(get_user_repo),
):
    """Get current authenticated user info."""
    user = account_service.get_profile(repo, current_user.id)
    return UserProfile(**user.public_profile())


@router.patch("/me", response_model=UserProfile)
def update_me(
    request: UpdateProfileRequest,
    current_user: UserProfile = Depends(get_current_user_required),
    repo: UserRepository = Depends(get_user_repo),
):
    """Update name, phone and/or address of the current user."""
    patch = request.model_dump(exclude_unset=True)
    user = account_service.update_profile(repo, current_user.id, patch)
    return UserProfile(**user.public_profile())
