"""Centralized error types and message definitions for selector building.

This module provides the exceptions raised by ``SelectorExpression`` and the
human-readable messages attached to them.
"""

from __future__ import annotations


def generate_error_message(code: str, kind: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        kind: Optional fragment category name to include for context

    Returns:
        Human-readable error message string
    """
    messages = {
        "duplicate-fragment": "Element, id and pseudo-element should not occur more then one time inside the selector",
        "order-violation": (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        ),
    }
    context = {
        "duplicate-fragment": f" ({kind} already present)",
        "order-violation": f" ({kind} appended too late)",
    }

    # Return message or fall back to the code itself if not found
    message = messages.get(code, code)
    if kind and code in context:
        message += context[code]
    return message


class SelectorBuildError(ValueError):
    """Raised when a selector is built out of grammar."""

    code: str = "selector-build-error"

    def __init__(self, kind: str | None = None) -> None:
        self.kind = kind
        super().__init__(generate_error_message(self.code, kind))


class DuplicateFragmentError(SelectorBuildError):
    """Element, id or pseudo-element was supplied more than once."""

    code = "duplicate-fragment"


class OrderViolationError(SelectorBuildError):
    """A fragment came after a category that must follow it."""

    code = "order-violation"
