import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from core.db import Base
from models.cart import Cart
from models.dish import Dish


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def make_dish():
    def _make(id="a", price="10", currency="$", carbon_score="Low", carbon_footprint=0.5, **kwargs):
        return Dish(
            id=id,
            name=kwargs.pop("name", f"Dish {id}"),
            price=Decimal(price),
            currency=currency,
            carbon_footprint=carbon_footprint,
            carbon_score=carbon_score,
            **kwargs,
        )
    return _make


@pytest.fixture
def cart():
    return Cart()


@pytest.fixture
def session_token(db):
    from core.auth_service import login, signup

    signup(db, "Cart Owner", "cart.owner@university.edu", "cart-pass-1")
    _, token = login(db, "cart.owner@university.edu", "cart-pass-1")
    return token
