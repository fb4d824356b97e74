"""BaseService — foundation for services that answer universe queries.

Every service receives a :class:`QueryEngine` at construction time.  The
engine owns the universe graph and the current center; services turn its
return values and exceptions into :class:`ServiceResult` envelopes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from baconctl.services.query import QueryEngine


class BaseService:
    """Base for service-layer classes wrapping a shared QueryEngine."""

    def __init__(self, engine: QueryEngine[str, frozenset[str]]) -> None:
        self._engine = engine

    @property
    def engine(self) -> QueryEngine[str, frozenset[str]]:
        return self._engine
