"""LIKE pattern decomposition.

Only leading and trailing ``%`` wildcards are recognised. The pattern is
classified purely by the presence of ``%`` at its first and last position;
deciding which shapes the store can serve is left to the translator.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

__all__ = ("LikePattern", "decompose_like")

LikeKind = Literal["equals", "begins_with", "ends_with", "contains"]

_WILDCARD = "%"


class LikePattern(BaseModel):
    """Result of decomposing a LIKE pattern; exactly one field is set."""

    model_config = ConfigDict(frozen=True)

    equals: Optional[str] = None
    begins_with: Optional[str] = None
    ends_with: Optional[str] = None
    contains: Optional[str] = None

    @property
    def kind(self) -> LikeKind:
        if self.contains is not None:
            return "contains"
        if self.ends_with is not None:
            return "ends_with"
        if self.begins_with is not None:
            return "begins_with"
        return "equals"


def decompose_like(pattern: str) -> LikePattern:
    """Classify a LIKE pattern by its leading/trailing wildcards.

    Examples:
        decompose_like("%abc%") -> LikePattern(contains="abc")
        decompose_like("%abc")  -> LikePattern(ends_with="abc")
        decompose_like("abc%")  -> LikePattern(begins_with="abc")
        decompose_like("abc")   -> LikePattern(equals="abc")
    """
    if pattern.startswith(_WILDCARD):
        if pattern.endswith(_WILDCARD):
            # a lone "%" is both leading and trailing
            return LikePattern(contains=pattern[1:-1])
        return LikePattern(ends_with=pattern[1:])
    if pattern.endswith(_WILDCARD):
        return LikePattern(begins_with=pattern[:-1])
    return LikePattern(equals=pattern)
