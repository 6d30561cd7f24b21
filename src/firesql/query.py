"""Store query capability and its default in-memory implementation.

The translator only needs one capability from a store query: add one more
filter conjunctively and get a new query back, leaving the receiver intact.
`Query` captures that contract; any store client can be wrapped to satisfy
it. `FilterQuery` is an immutable accumulator of `Filter` primitives that
callers can inspect, print or hand to an executor.

Typical usage:

- Seed a translation: ``[FilterQuery()]``
- Inspect a result: ``[q.to_dict() for q in translate_where([FilterQuery()], node)]``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .constants import RANGE_FILTER_OPS

__all__ = (
    "Filter",
    "Query",
    "FilterQuery",
    "QuerySet",
)


class Filter(BaseModel):
    """A single (field, operator, value) constraint native to the store."""

    model_config = ConfigDict(frozen=True)

    field: str
    op: str
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "op": self.op, "value": self.value}

    def __str__(self) -> str:
        return f"{self.field} {self.op} {self.value!r}"


class Query(ABC):
    """Abstract store query that supports conjunctive filter refinement."""

    @abstractmethod
    def where(self, field: str, op: str, value: Any) -> "Query":
        """Return a new query with one more filter; the receiver is not modified."""
        raise NotImplementedError


class FilterQuery(BaseModel, Query):
    """Immutable conjunction of filter primitives.

    Equality is structural, so two translations of the same expression
    compare equal.
    """

    model_config = ConfigDict(frozen=True)

    collection: Optional[str] = None
    filters: Tuple[Filter, ...] = Field(default=())

    def where(self, field: str, op: str, value: Any) -> "FilterQuery":
        return self.model_copy(update={"filters": self.filters + (Filter(field=field, op=op, value=value),)})

    @property
    def range_fields(self) -> List[str]:
        """Distinct fields carrying a range filter, in first-seen order."""
        fields: List[str] = []
        for f in self.filters:
            if f.op in RANGE_FILTER_OPS and f.field not in fields:
                fields.append(f.field)
        return fields

    def to_dict(self) -> Dict[str, Any]:
        node: Dict[str, Any] = {"filters": [f.to_dict() for f in self.filters]}
        if self.collection is not None:
            node["collection"] = self.collection
        return node

    def __str__(self) -> str:
        if not self.filters:
            return "<all>"
        return " AND ".join(str(f) for f in self.filters)

    def __repr__(self) -> str:
        return f"<FilterQuery: {self}>"


QuerySet = List[Query]
