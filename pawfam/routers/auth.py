# pawfam/routers/auth.py
from datetime import timedelta
from functools import lru_cache

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from pawfam.core.auth import get_current_user, get_token_issuer
from pawfam.core.config import get_settings
from pawfam.core.email_client import EmailClient
from pawfam.database import get_session
from pawfam.models.user import User
from pawfam.repositories.user_repo import UserRepository
from pawfam.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    OtpSentResponse,
    OtpVerifiedResponse,
    RegisterRequest,
    ResetOtpRequest,
    VerifyOtpRequest,
)
from pawfam.services.auth_service import AuthService
from pawfam.services.notification_service import NotificationService

router = APIRouter(prefix="/auth", tags=["Auth"])


@lru_cache
def get_auth_service() -> AuthService:
    """
    AuthService wired from settings.

    Tests override this dependency to inject a fake notifier and clock.
    """
    settings = get_settings()
    notifier = NotificationService(
        EmailClient.from_settings(settings),
        otp_ttl_minutes=settings.OTP_EXPIRE_MINUTES,
    )
    return AuthService(
        repo=UserRepository(),
        tokens=get_token_issuer(),
        notifier=notifier,
        otp_ttl=timedelta(minutes=settings.OTP_EXPIRE_MINUTES),
    )


# -------- Registration / login --------


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    session: Session = Depends(get_session),
    service: AuthService = Depends(get_auth_service),
):
    """Register a customer account."""
    return service.register(session, payload, role="customer")


@router.post("/vendor/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_vendor(
    payload: RegisterRequest,
    session: Session = Depends(get_session),
    service: AuthService = Depends(get_auth_service),
):
    """Register a vendor account."""
    return service.register(session, payload, role="vendor")


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    session: Session = Depends(get_session),
    service: AuthService = Depends(get_auth_service),
):
    """
    Log in with email + password (any role).

    Errors:
      - 400 "Invalid credentials" for unknown email or wrong password
    """
    return service.login(session, payload)


@router.post("/vendor/login", response_model=AuthResponse)
def login_vendor(
    payload: LoginRequest,
    session: Session = Depends(get_session),
    service: AuthService = Depends(get_auth_service),
):
    """Log in to a vendor account. Non-vendor accounts are rejected as invalid credentials."""
    return service.login(session, payload, vendor_only=True)


@router.get("/me", response_model=MeResponse)
def read_me(
    current_user: User = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """
    Return the authenticated user's identity.

    Auth:
      - Requires a valid bearer token.
    """
    return service.get_me(current_user)


# -------- Password recovery --------


@router.post("/send-reset-otp", response_model=OtpSentResponse)
def send_reset_otp(
    payload: ResetOtpRequest,
    session: Session = Depends(get_session),
    service: AuthService = Depends(get_auth_service),
):
    """
    Email a 6-character reset code valid for 10 minutes.

    Errors:
      - 404 if no account uses the email
      - 500 if the mail relay fails
    """
    return service.send_reset_otp(session, payload)


@router.post("/verify-reset-otp", response_model=OtpVerifiedResponse)
def verify_reset_otp(
    payload: VerifyOtpRequest,
    session: Session = Depends(get_session),
    service: AuthService = Depends(get_auth_service),
):
    """
    Verify a reset code; on success a temporary password is emailed.

    Errors:
      - 404 if no account uses the email
      - 400 if no code is pending, the code expired, or it does not match
    """
    return service.verify_reset_otp(session, payload)
