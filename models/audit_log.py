# models/audit_log.py
from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from core.db import Base


class AuditLog(Base):
    """Append-only trail of signups, logins, orders and waste logging."""

    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_email = Column(String, nullable=False, index=True)
    action = Column(String, nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<AuditLog {self.timestamp:%Y-%m-%d %H:%M} {self.user_email}: {self.action}>"
