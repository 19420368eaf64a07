# core/waste_service.py
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import MissingFields, ValidationError, InternalError
from core.logger import get_logger, log_action
from models.waste_entry import WasteEntry, WASTE_SOURCES, DISPOSAL_METHODS, MEAL_PERIODS

logger = get_logger(__name__)


def _parse_date(value):
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}. Use YYYY-MM-DD.")


def _parse_quantity(value):
    try:
        quantity = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid quantity: {value!r}")
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
    return quantity


def log_waste_entry(
    db: Session,
    food_type: str,
    quantity,
    entry_date=None,
    source: str = "Cafeteria",
    disposal_method: str = "Compost",
    meal_period: str = "Lunch",
    notes: str = None,
    logged_by: str = None,
) -> WasteEntry:
    """Append a waste entry to the log. Entries are never edited afterwards."""
    if not food_type or quantity in (None, ""):
        raise MissingFields("Please fill in all required fields")
    if source not in WASTE_SOURCES:
        raise ValidationError(f"Unknown waste source: {source}")
    if disposal_method not in DISPOSAL_METHODS:
        raise ValidationError(f"Unknown disposal method: {disposal_method}")
    if meal_period not in MEAL_PERIODS:
        raise ValidationError(f"Unknown meal period: {meal_period}")

    entry = WasteEntry(
        date=_parse_date(entry_date) if entry_date else date.today(),
        source=source,
        food_type=food_type.strip(),
        quantity=_parse_quantity(quantity),
        disposal_method=disposal_method,
        meal_period=meal_period,
        notes=notes or None,
        logged_by=logged_by,
    )

    try:
        db.add(entry)
        db.commit()
        db.refresh(entry)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to save waste entry")
        raise InternalError() from e

    logger.info("Logged %.2f kg of %s (%s)", entry.quantity, entry.food_type, entry.disposal_method)
    if logged_by:
        log_action(db, logged_by, f"Logged {entry.quantity} kg {entry.food_type} waste")
    return entry


def get_waste_entries(db: Session, start=None, end=None):
    """All entries, newest first. Optional inclusive date range."""
    query = db.query(WasteEntry)
    if start:
        query = query.filter(WasteEntry.date >= _parse_date(start))
    if end:
        query = query.filter(WasteEntry.date <= _parse_date(end))
    return query.order_by(WasteEntry.date.desc(), WasteEntry.id.desc()).all()
