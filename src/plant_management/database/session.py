from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, ContextManager

from sqlalchemy.orm import Session

TransactionFactory = Callable[[], ContextManager]


@contextmanager
def transaction(session: Session):
    """Commit when the block succeeds, roll back when it raises."""

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


def transaction_factory(session: Session) -> TransactionFactory:
    def _begin():
        return transaction(session)

    return _begin
