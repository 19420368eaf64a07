# core/user_service.py
from sqlalchemy.orm import Session

from core.auth_service import hash_password
from core.config import ADMIN_EMAIL, ADMIN_PASSWORD
from core.logger import get_logger
from models.user import User

logger = get_logger(__name__)


def get_user_by_id(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()


def create_default_admin(db: Session):
    email = ADMIN_EMAIL.strip().lower()
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        logger.info("Admin already exists.")
        return existing

    admin = User(
        name="Admin User",
        email=email,
        password_hash=hash_password(ADMIN_PASSWORD),
        role="Admin",
    )
    db.add(admin)
    db.commit()
    logger.info("Default admin created: %s", email)
    return admin
