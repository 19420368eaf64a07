# Import every mapped class so relationship() targets resolve no matter
# which service module is imported first.
from models.user import User
from models.auth_session import AuthSession
from models.order import Order, OrderItem
from models.waste_entry import WasteEntry
from models.audit_log import AuditLog
