"""Custom exceptions for the FireSQL WHERE translator.

Every failure raised while translating a WHERE expression derives from
`TranslationError`. Errors are synchronous and abort the whole translation;
no partial query set is ever returned.
"""

from typing import Any, Dict


# Base exception
class FireSQLError(Exception):
    """Base exception for all FireSQL errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., operator, column, pattern)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class TranslationError(FireSQLError):
    """Raised when a WHERE expression cannot be translated into store queries."""


# Shape exceptions
class ShapeError(TranslationError):
    """Raised when an operand has the wrong node type or arity.

    Example:
        >>> raise ShapeError("BETWEEN needs 2 values in WHERE clause.", operator="BETWEEN", count=3)
    """


class InvalidExpressionError(ShapeError):
    """Raised when a raw parser tree cannot be validated into expression nodes.

    Example:
        >>> raise InvalidExpressionError("Invalid WHERE expression", errors=[...])
    """


# Unsupported constructs
class UnsupportedConstructError(TranslationError):
    """Raised when a WHERE construct has no equivalent in the store's filter algebra.

    Example:
        >>> raise UnsupportedConstructError("Unsupported WHERE clause", node_type="function")
    """


class UnsupportedLikeError(UnsupportedConstructError):
    """Raised when a LIKE pattern needs suffix or substring matching.

    Example:
        >>> raise UnsupportedLikeError("Unsupported LIKE pattern", pattern="%abc", shape="ends_with")
    """


class UnsupportedOperatorError(UnsupportedConstructError):
    """Raised for negation operators the store cannot express (NOT, NOT CONTAINS).

    Example:
        >>> raise UnsupportedOperatorError('"NOT" WHERE operator unsupported', operator="NOT")
    """


class UnknownOperatorError(TranslationError):
    """Raised when a comparison token is not a known WHERE operator.

    Example:
        >>> raise UnknownOperatorError("Unknown WHERE operator", operator="REGEXP")
    """
