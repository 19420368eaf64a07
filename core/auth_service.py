# core/auth_service.py
from datetime import datetime

import bcrypt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import BCRYPT_ROUNDS
from core.errors import (
    DuplicateEmail,
    InternalError,
    InvalidCredentials,
    MissingFields,
    Unauthenticated,
    ValidationError,
)
from core.logger import get_logger, log_action
from core.session_manager import end_session, get_active_session, start_session
from models.user import User, USER_ROLES

logger = get_logger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def signup(db: Session, name: str, email: str, password: str, role: str = "Student", dietary_restrictions=None) -> User:
    """Register a new user. Raises MissingFields or DuplicateEmail."""
    if not name or not email or not password:
        raise MissingFields()
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    if role not in USER_ROLES:
        raise ValidationError(f"Unknown role: {role}")

    email = _normalize_email(email)
    try:
        if db.query(User).filter(User.email == email).first():
            logger.info("User already exists: %s", email)
            raise DuplicateEmail()

        user = User(
            name=name.strip(),
            email=email,
            password_hash=hash_password(password),
            role=role,
            dietary_restrictions=",".join(dietary_restrictions or []),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as e:
        # concurrent signup with the same email
        db.rollback()
        raise DuplicateEmail("This email is already registered") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database operation failed during signup for %s", email)
        raise InternalError() from e

    logger.info("User created successfully: %s", email)
    log_action(db, email, "Signed up")
    return user


def login(db: Session, email: str, password: str):
    """Return (user, session_token). Raises MissingFields or InvalidCredentials."""
    if not email or not password:
        raise MissingFields()

    email = _normalize_email(email)
    try:
        user = db.query(User).filter(User.email == email).first()
        if not user or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            raise InvalidCredentials()

        session = start_session(db, user)
        user.last_login = datetime.utcnow()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database operation failed during login for %s", email)
        raise InternalError() from e

    log_action(db, email, "Logged in")
    return user, session.token


def get_current_user(db: Session, session_token: str) -> User:
    """Resolve a session token to its user. Raises Unauthenticated."""
    try:
        session = get_active_session(db, session_token)
    except SQLAlchemyError as e:
        logger.exception("Auth check failed")
        raise InternalError() from e

    if session is None or session.user is None:
        raise Unauthenticated()
    return session.user


def logout(db: Session, session_token: str):
    try:
        end_session(db, session_token)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Logout failed")
        raise InternalError() from e
