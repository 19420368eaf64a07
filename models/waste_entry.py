# models/waste_entry.py
from sqlalchemy import Column, Integer, String, Float, Date, DateTime
from datetime import datetime
from core.db import Base

WASTE_SOURCES = ("Cafeteria", "Event", "Residential")
DISPOSAL_METHODS = ("Compost", "Landfill", "Donation")
MEAL_PERIODS = ("Breakfast", "Lunch", "Dinner", "Special Event")


class WasteEntry(Base):
    __tablename__ = "waste_entries"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=False, index=True)
    source = Column(String, nullable=False)
    food_type = Column(String, nullable=False)
    quantity = Column(Float, nullable=False)  # kg
    disposal_method = Column(String, nullable=False)
    meal_period = Column(String, nullable=False, default="Lunch")
    notes = Column(String, nullable=True)
    logged_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "source": self.source,
            "food_type": self.food_type,
            "quantity": self.quantity,
            "disposal_method": self.disposal_method,
            "meal_period": self.meal_period,
            "notes": self.notes,
        }
