"""Centralized error definitions for selector building and JSON decoding.

Every exception raised by cssbuilder carries a kebab-case ``code``; the
human-readable text for that code lives in one table here so the builder and
the CLI report identical messages.
"""

from __future__ import annotations

PART_ORDER: tuple[str, ...] = (
    "element",
    "id",
    "class",
    "attribute",
    "pseudo-class",
    "pseudo-element",
)


def generate_error_message(code: str, part: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        part: Optional selector part category to include in the message

    Returns:
        Human-readable error message string
    """
    messages = {
        # Cardinality
        "duplicate-part": (
            "Element, id and pseudo-element should not occur more than one time inside the selector"
            if part is None
            else f"Selector already has its {part}; element, id and pseudo-element "
            "should not occur more than one time inside the selector"
        ),
        # Ordering
        "order-violation": "Selector parts should be arranged in the following order: " + ", ".join(PART_ORDER),
        # JSON decoding
        "invalid-json": "Invalid JSON text",
        "expected-json-object": "Expected a JSON object to populate the prototype",
        "unknown-attribute": "Prototype does not accept attribute",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class SelectorBuildError(ValueError):
    """Raised when a selector part is written in a way the builder rejects."""

    code: str = "selector-build-error"

    def __init__(self, part: str | None = None, message: str | None = None) -> None:
        self.part = part
        super().__init__(message or generate_error_message(self.code, part))


class DuplicatePartError(SelectorBuildError):
    """Raised when element, id or pseudo-element is written a second time."""

    code = "duplicate-part"


class OrderViolationError(SelectorBuildError):
    """Raised when a part is written after a part that must follow it."""

    code = "order-violation"


class DecodeError(ValueError):
    """Raised when JSON text cannot be turned into the requested value."""

    code: str

    def __init__(self, code: str, detail: str | None = None) -> None:
        self.code = code
        message = generate_error_message(code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
