"""WHERE clause translation.

Exports the translator entry points. Operator mapping and LIKE pattern
decomposition live in the `operators` and `like` modules.
"""

from .like import LikePattern, decompose_like
from .operators import map_operator
from .translator import WhereTranslator, translate_where, where_translator

__all__ = (
    "WhereTranslator",
    "where_translator",
    "translate_where",
    "map_operator",
    "decompose_like",
    "LikePattern",
)
