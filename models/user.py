from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from core.db import Base

USER_ROLES = ("Student", "Staff", "Admin")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, default="Student")
    dietary_restrictions = Column(String, default="")  # comma separated, e.g. "Vegetarian,Gluten-Free"
    created_at = Column(DateTime, default=datetime.utcnow)
    last_login = Column(DateTime, nullable=True)

    # Relationships
    orders = relationship("Order", back_populates="user", cascade="all, delete-orphan")
    sessions = relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")

    @property
    def dietary_restriction_list(self):
        return [r.strip() for r in (self.dietary_restrictions or "").split(",") if r.strip()]

    def to_dict(self):
        """Public view of the user; never includes the password hash."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "dietary_restrictions": self.dietary_restriction_list,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
