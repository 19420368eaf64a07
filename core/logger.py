# core/logger.py
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import LOG_LEVEL
from models.audit_log import AuditLog

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


logger = get_logger(__name__)


def log_action(db: Session, user_email: str, action: str):
    """Record a user action into the audit log. Failures are logged, not raised."""
    try:
        db.add(AuditLog(user_email=user_email, action=action, timestamp=datetime.utcnow()))
        db.commit()
    except SQLAlchemyError as e:
        logger.warning("Audit log error: %s", e)
        db.rollback()
