from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class ServiceBase:
    def __init__(self, session: Session):
        self._session = session

    @contextmanager
    def unit_of_work(self, action: str) -> Iterator[None]:
        """Commit the repository calls made inside the block, or roll them all back."""
        try:
            yield
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error during %s: %s", action, e)
            raise


__all__ = ["ServiceBase"]
