"""
Sizefmt utilities shared across the package.

Small formatting helpers for exception messages, kept here to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Both `class_name(10)` and `class_name(int)` return 'int'. Builtins are never qualified.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(ValueError, fully_qualified=True)
        'ValueError'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    if fully_qualified and cls.__module__ != "builtins":
        return cls.__module__ + "." + cls.__name__
    return cls.__name__


def fmt_type(obj: Any) -> str:
    """Format type information of an object or a type for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(str)
        '<str>'
    """
    return f"<{class_name(obj)}>"


def fmt_value(obj: Any, *, max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Broken __repr__ methods are tolerated, and long representations are truncated
    with an ellipsis.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("x" * 100, max_repr=5)
        "<str: 'xxx...>"
    """
    repr_ = _safe_repr(obj)
    if max_repr > 0 and len(repr_) > max_repr:
        repr_ = repr_[:max_repr - 1] + "..."
    return f"<{class_name(obj)}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _safe_repr(obj: Any) -> str:
    """Defensive repr() call, handles broken __repr__ methods"""
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
