"""
Exception hierarchy for deeppath.

All errors raised by the traversal engine derive from DeepPathError, so callers
can catch every library failure with a single except clause. Missing keys,
indices and accessors are never errors in read mode; only malformed paths are.
"""

from typing import Any


class DeepPathError(Exception):
    """
    Base exception for all deeppath errors.

    Example:
        try:
            deeppath.set(cell, "a", 0, "b", 1)
        except DeepPathError as e:
            lg.error("write failed", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class TraversalError(DeepPathError):
    """
    Raised when a path demands descent into something that cannot be descended into.

    Examples:
        - A key applied to a string, number or other terminal scalar
        - A forced map key applied to a sequence
        - A forced index applied to a map
    """

    pass


class InvocationError(DeepPathError):
    """
    Raised when an accessor-style step targets something that is not an object.

    Examples:
        - A method or attribute step against None or a plain container
        - A zero-key write to a root that is not a Cell
        - A write through an accessor call that returned None
        - A write into a read-only container (tuple, mappingproxy)
    """

    pass


class InvalidKeyError(DeepPathError, ValueError):
    """
    Raised when a key or path cannot be interpreted.

    Examples:
        - Descriptor dict with zero, several or unknown fields
        - Non-integer index on a sequence write
        - Unbalanced bracket in a dotted path string
    """

    pass


class ConfigError(DeepPathError):
    """
    Configuration-related errors.

    Examples:
        - Config file is not a YAML mapping
        - Environment override with an unparseable boolean
    """

    pass
