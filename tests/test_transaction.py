from decimal import Decimal

import pytest
from sqlalchemy import func

from onetouch.core.exceptions import NotFoundError, UnexpectedError
from onetouch.core.transaction import transaction
from onetouch.shared.database.models import Product


def _product(name="Bolt"):
    return Product(name=name, category="Hardware", quantity=1, price=Decimal("1.00"), cost=Decimal("0.50"))


def _count(db):
    return db.query(func.count(Product.id)).scalar()


def test_commits_on_success(db_session, session_factory):
    with transaction(db_session):
        db_session.add(_product())

    other = session_factory()
    try:
        assert _count(other) == 1
    finally:
        other.close()


def test_business_error_rolls_back_and_propagates(db_session):
    with pytest.raises(NotFoundError):
        with transaction(db_session, "Error saving"):
            db_session.add(_product())
            db_session.flush()
            raise NotFoundError("Product not found")

    assert _count(db_session) == 0


def test_other_errors_become_unexpected_error(db_session):
    with pytest.raises(UnexpectedError) as exc_info:
        with transaction(db_session, "Error saving"):
            db_session.add(_product())
            db_session.flush()
            raise RuntimeError("disk full")

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Error saving"
    assert exc_info.value.extra == {}
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert _count(db_session) == 0


def test_expose_details_keeps_driver_message(db_session):
    with pytest.raises(UnexpectedError) as exc_info:
        with transaction(db_session, "Error deleting product", expose_details=True):
            raise RuntimeError("deadlock detected")

    assert exc_info.value.extra == {"details": "deadlock detected"}
