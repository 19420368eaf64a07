# core/session_manager.py
from datetime import datetime
import secrets

from sqlalchemy.orm import Session

from core.cart_service import discard_session_cart, prune_session_carts
from core.config import SESSION_TTL_HOURS, IS_PRODUCTION
from core.logger import get_logger
from models.auth_session import AuthSession

logger = get_logger(__name__)

SESSION_COOKIE_NAME = "auth-token"


def session_cookie_options() -> dict:
    """Cookie attributes for the session token"""
    return {
        "key": SESSION_COOKIE_NAME,
        "httponly": True,
        "secure": IS_PRODUCTION,
        "samesite": "strict",
        "max_age": SESSION_TTL_HOURS * 60 * 60,
        "path": "/",
    }


def start_session(db: Session, user, now: datetime = None) -> AuthSession:
    """Issue a new opaque session token for the user (caller commits)"""
    now = now or datetime.utcnow()
    session = AuthSession(
        token=secrets.token_urlsafe(32),
        user_id=user.id,
        created_at=now,
        expires_at=AuthSession.generate_expiry(SESSION_TTL_HOURS, now),
    )
    db.add(session)
    logger.info("Session started for %s", user.email)
    return session


def get_active_session(db: Session, token: str, now: datetime = None):
    """Return the session for token, or None when missing or expired"""
    if not token:
        return None
    session = db.query(AuthSession).filter(AuthSession.token == token).first()
    if session is None:
        return None
    if session.is_expired(now):
        logger.info("Session expired for user %s", session.user_id)
        return None
    return session


def end_session(db: Session, token: str) -> bool:
    """End the session and drop its cart"""
    discard_session_cart(token)
    deleted = db.query(AuthSession).filter(AuthSession.token == token).delete()
    db.commit()
    return bool(deleted)


def purge_expired_sessions(db: Session, now: datetime = None) -> int:
    now = now or datetime.utcnow()
    expired = db.query(AuthSession).filter(AuthSession.expires_at <= now).all()
    for session in expired:
        discard_session_cart(session.token)
        db.delete(session)
    db.commit()
    live = [token for (token,) in db.query(AuthSession.token).filter(AuthSession.expires_at > now)]
    prune_session_carts(live)
    return len(expired)
