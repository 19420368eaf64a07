from datetime import date, timedelta

from core.db import Base, engine, SessionLocal
from core.logger import get_logger
from core.user_service import create_default_admin
from core.waste_service import log_waste_entry
import models  # noqa: F401  registers all tables on Base.metadata
from models.waste_entry import WasteEntry

logger = get_logger("init_db")

# (days ago, source, food type, kg, disposal, meal period, notes)
SAMPLE_WASTE = [
    (0, "Cafeteria", "Vegetables", 4.5, "Compost", "Lunch", "Salad bar trimmings"),
    (0, "Cafeteria", "Prepared Food", 3.2, "Donation", "Dinner", "Unserved curry trays"),
    (1, "Residential", "Food Scraps", 2.1, "Compost", "Breakfast", None),
    (2, "Event", "Leftovers", 6.8, "Donation", "Special Event", "Orientation buffet"),
    (3, "Cafeteria", "Bread", 1.9, "Landfill", "Lunch", None),
    (4, "Cafeteria", "Rice", 3.6, "Compost", "Dinner", None),
    (5, "Residential", "Packaging", 0.8, "Landfill", "Dinner", "Takeout containers"),
    (6, "Cafeteria", "Fruits", 2.4, "Compost", "Breakfast", None),
    (9, "Event", "Prepared Food", 5.0, "Landfill", "Special Event", "Sports day catering"),
    (11, "Cafeteria", "Vegetables", 3.9, "Compost", "Lunch", None),
]


def seed_waste_entries(db):
    if db.query(WasteEntry).first():
        logger.info("Waste entries already seeded.")
        return
    today = date.today()
    for days_ago, source, food_type, kg, disposal, period, notes in reversed(SAMPLE_WASTE):
        log_waste_entry(
            db,
            food_type=food_type,
            quantity=kg,
            entry_date=today - timedelta(days=days_ago),
            source=source,
            disposal_method=disposal,
            meal_period=period,
            notes=notes,
        )
    logger.info("Sample waste entries seeded.")


def init_db():
    logger.info("Rebuilding database (drop/create)...")
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created: %s", ", ".join(sorted(Base.metadata.tables)))

    db = SessionLocal()
    try:
        create_default_admin(db)
        seed_waste_entries(db)
    finally:
        db.close()
    logger.info("Database initialization complete!")


if __name__ == "__main__":
    init_db()
