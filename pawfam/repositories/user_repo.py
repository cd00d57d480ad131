# pawfam/repositories/user_repo.py
import uuid
from datetime import datetime

from sqlalchemy import update
from sqlmodel import Session, select

from pawfam.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    # ----- Lookups -----

    def get_by_id(self, session: Session, user_id: uuid.UUID) -> User | None:
        """Return a User by primary key, or None if not found."""
        return session.get(User, user_id)

    def get_by_email(
        self,
        session: Session,
        email: str,
        role: str | None = None,
    ) -> User | None:
        """Return a User by (lower-cased) email, optionally scoped to a role."""
        stmt = select(User).where(User.email == email)
        if role is not None:
            stmt = stmt.where(User.role == role)
        return session.exec(stmt).first()

    def get_by_username(self, session: Session, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return session.exec(stmt).first()

    # ----- Writes -----

    def create(self, session: Session, user: User) -> User:
        """
        Insert a new User and return the persisted row.

        Raises sqlalchemy.exc.IntegrityError on a unique-index violation;
        the caller is responsible for rolling back.
        """
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    def update(self, session: Session, user: User) -> User:
        """Persist changes to an existing User."""
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    # ----- Password reset -----

    def set_reset_code(
        self,
        session: Session,
        user: User,
        code: str,
        expires_at: datetime,
    ) -> User:
        """Store a pending reset code, replacing any previous one."""
        user.reset_code = code
        user.reset_code_expiry = expires_at
        return self.update(session, user)

    def clear_reset_code(self, session: Session, user: User) -> User:
        user.reset_code = None
        user.reset_code_expiry = None
        return self.update(session, user)

    def consume_reset_code(
        self,
        session: Session,
        user_id: uuid.UUID,
        code: str,
        now: datetime,
        new_password_hash: str,
    ) -> bool:
        """
        Atomically swap the password and clear the reset code.

        The UPDATE only matches while the stored code still equals `code`
        and has not expired, so two concurrent verifications cannot both
        consume the same code.

        Returns:
            True if this call consumed the code, False otherwise.
        """
        stmt = (
            update(User)
            .where(
                User.id == user_id,
                User.reset_code == code,
                User.reset_code_expiry > now,
            )
            .values(
                password_hash=new_password_hash,
                reset_code=None,
                reset_code_expiry=None,
            )
        )
        result = session.connection().execute(stmt)
        session.commit()
        return result.rowcount == 1
