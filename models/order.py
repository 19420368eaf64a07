# models/order.py
from collections import defaultdict
from decimal import Decimal
from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from datetime import datetime
from core.db import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    status = Column(String, default="Pending")
    pickup_time = Column(String, nullable=True)
    total_carbon = Column(Float, default=0.0)  # kg CO2e
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="orders")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")

    def totals_by_currency(self, discounted: bool = True):
        """Charged (or pre-discount) totals, one per currency. Never converted."""
        totals = defaultdict(Decimal)
        for item in self.items:
            totals[item.currency] += item.discounted_subtotal if discounted else item.subtotal
        return dict(totals)


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    dish_id = Column(String, nullable=False, index=True)
    dish_name = Column(String, nullable=False)
    currency = Column(String, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)
    carbon_score = Column(String, nullable=False)
    carbon_footprint = Column(Float, default=0.0)  # per serving
    subtotal = Column(Numeric(10, 2), nullable=False)
    discounted_subtotal = Column(Numeric(10, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")
