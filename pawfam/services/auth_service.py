# pawfam/services/auth_service.py
import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from pawfam.core.clock import as_utc, utcnow
from pawfam.core.errors import (
    BadRequestError,
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
)
from pawfam.core.otp import codes_match, generate_otp, generate_temporary_password
from pawfam.core.security import TokenIssuer, dummy_verify, hash_password, verify_password
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
    UserPublic,
    VerifyOtpRequest,
)
from pawfam.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

NO_PENDING_OTP = "No OTP found. Please request a new OTP."


def _conflicting_field(exc: IntegrityError) -> str:
    """Name the unique column a duplicate-key error refers to."""
    detail = str(exc.orig).lower()
    for field in ("email", "username"):
        if field in detail:
            return field
    return "account"


class AuthService:
    """
    Registration, login and OTP-based password recovery.

    Recovery state per user:
      - no pending reset: reset_code / reset_code_expiry are NULL
      - pending reset: both set; a new request overwrites them
      - success, or verifying an expired code, clears both
    """

    def __init__(
        self,
        repo: UserRepository,
        tokens: TokenIssuer,
        notifier: NotificationService,
        otp_ttl: timedelta = timedelta(minutes=10),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repo = repo
        self.tokens = tokens
        self.notifier = notifier
        self.otp_ttl = otp_ttl
        self.clock = clock

    # ----- Registration / login -----

    def register(
        self,
        session: Session,
        payload: RegisterRequest,
        role: str = "customer",
    ) -> AuthResponse:
        """
        Create an account and issue a session token.

        Rules:
          - email (case-insensitive) and username must be unused
          - a duplicate that slips past the checks is caught by the
            unique indexes and reported the same way
        """
        if self.repo.get_by_email(session, payload.email):
            raise ConflictError("email", "User already exists with this email")
        if self.repo.get_by_username(session, payload.username):
            raise ConflictError("username", "Username is already taken")

        user = User(
            username=payload.username,
            email=payload.email,
            password_hash=hash_password(payload.password),
            role=role,
        )
        try:
            user = self.repo.create(session, user)
        except IntegrityError as exc:
            session.rollback()
            raise ConflictError(_conflicting_field(exc))

        logger.info("Registered %s account %s", role, user.id)
        label = "Vendor" if role == "vendor" else "User"
        return self._auth_response(user, f"{label} registered successfully")

    def login(
        self,
        session: Session,
        payload: LoginRequest,
        vendor_only: bool = False,
    ) -> AuthResponse:
        """
        Authenticate by email + password.

        Unknown email, non-vendor on the vendor path and wrong password
        all raise the same InvalidCredentialsError.
        """
        role = "vendor" if vendor_only else None
        user = self.repo.get_by_email(session, payload.email, role=role)
        if user is None:
            dummy_verify()
            raise InvalidCredentialsError()
        if not verify_password(payload.password, user.password_hash):
            raise InvalidCredentialsError()

        label = "Vendor login" if vendor_only else "Login"
        return self._auth_response(user, f"{label} successful")

    def get_me(self, current_user: User) -> MeResponse:
        return MeResponse(user=UserPublic.model_validate(current_user, from_attributes=True))

    # ----- Password recovery -----

    def send_reset_otp(self, session: Session, payload: ResetOtpRequest) -> OtpSentResponse:
        """
        Issue a reset code for the account and email it.

        Any previously pending code for the account stops working.
        """
        user = self.repo.get_by_email(session, payload.email)
        if user is None:
            raise NotFoundError("No account found with this email address")

        code = generate_otp()
        expires_at = self.clock() + self.otp_ttl
        self.repo.set_reset_code(session, user, code, expires_at)
        logger.info("Issued password reset OTP for user %s", user.id)

        self.notifier.send_otp_email(user.email, code)
        return OtpSentResponse(
            message="OTP has been sent to your email address",
            email=payload.email,
        )

    def verify_reset_otp(
        self,
        session: Session,
        payload: VerifyOtpRequest,
    ) -> OtpVerifiedResponse:
        """
        Check a reset code and, on success, replace the password with a
        system-generated temporary one that is emailed to the user.

        Raises:
            NotFoundError: no account for the email
            BadRequestError: no pending code, expired code, wrong code
        """
        user = self.repo.get_by_email(session, payload.email)
        if user is None:
            raise NotFoundError("User not found")

        if not user.reset_code or not user.reset_code_expiry:
            raise BadRequestError(NO_PENDING_OTP)

        now = self.clock()
        if now >= as_utc(user.reset_code_expiry):
            self.repo.clear_reset_code(session, user)
            logger.info("Expired reset OTP presented for user %s", user.id)
            raise BadRequestError("OTP has expired. Please request a new OTP.")

        if not codes_match(user.reset_code, payload.otp):
            logger.info("Invalid reset OTP presented for user %s", user.id)
            raise BadRequestError("Invalid OTP. Please try again.")

        user_id, email, username = user.id, user.email, user.username
        temporary_password = generate_temporary_password()
        consumed = self.repo.consume_reset_code(
            session,
            user_id,
            user.reset_code,
            now,
            hash_password(temporary_password),
        )
        if not consumed:
            # Another request consumed or replaced the code after our read
            raise BadRequestError(NO_PENDING_OTP)

        logger.info("Password reset completed for user %s", user_id)
        self.notifier.send_temporary_password_email(email, temporary_password, username)
        return OtpVerifiedResponse(
            message=(
                "OTP verified successfully. A temporary password has been sent "
                "to your email address. Please change it after logging in."
            ),
            verified=True,
        )

    # ----- Helpers -----

    def _auth_response(self, user: User, message: str) -> AuthResponse:
        token = self.tokens.issue(user.id, user.role, now=self.clock())
        return AuthResponse(
            token=token,
            user=UserPublic.model_validate(user, from_attributes=True),
            message=message,
        )
