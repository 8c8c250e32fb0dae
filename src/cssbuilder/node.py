from __future__ import annotations

from typing import Protocol

from .errors import PART_ORDER, DuplicatePartError, OrderViolationError

# Rank of each part category; a node may only move forward through these.
ELEMENT: int = 0
ID: int = 1
CLASS: int = 2
ATTRIBUTE: int = 3
PSEUDO_CLASS: int = 4
PSEUDO_ELEMENT: int = 5

# Nothing written yet
_NO_RANK: int = -1


class Renderable(Protocol):
    def render(self) -> str: ...


class SelectorNode:
    """A compound selector under construction (e.g. ``a#nav.link[href]:hover::after``).

    Every setter returns the node itself so calls can be chained. Parts must
    be written in CSS order: element, id, class, attribute, pseudo-class,
    pseudo-element. Element, id and pseudo-element may appear once.
    """

    __slots__ = ("_rank", "attributes", "classes", "element_tag", "id_value", "pseudo_classes", "pseudo_element_value")

    element_tag: str | None
    id_value: str | None
    classes: list[str]
    attributes: list[str]
    pseudo_classes: list[str]
    pseudo_element_value: str | None
    _rank: int

    def __init__(self) -> None:
        self.element_tag = None
        self.id_value = None
        self.classes = []
        self.attributes = []
        self.pseudo_classes = []
        self.pseudo_element_value = None
        self._rank = _NO_RANK

    def __repr__(self) -> str:
        return f"SelectorNode({self.render()!r})"

    def __str__(self) -> str:
        return self.render()

    def _check_order(self, rank: int) -> None:
        """Reject a write to ``rank`` once a later category has been written."""
        if self._rank > rank:
            raise OrderViolationError(PART_ORDER[rank])

    def _advance(self, rank: int) -> SelectorNode:
        if rank > self._rank:
            self._rank = rank
        return self

    def set_element(self, value: str) -> SelectorNode:
        if self.element_tag is not None:
            raise DuplicatePartError(PART_ORDER[ELEMENT])
        self._check_order(ELEMENT)
        self.element_tag = str(value)
        return self._advance(ELEMENT)

    def set_id(self, value: str) -> SelectorNode:
        if self.id_value is not None:
            raise DuplicatePartError(PART_ORDER[ID])
        self._check_order(ID)
        self.id_value = str(value)
        return self._advance(ID)

    def add_class(self, value: str) -> SelectorNode:
        self._check_order(CLASS)
        self.classes.append(str(value))
        return self._advance(CLASS)

    def add_attribute(self, value: str) -> SelectorNode:
        # Raw text such as 'href$=".png"'; brackets are added on render
        self._check_order(ATTRIBUTE)
        self.attributes.append(str(value))
        return self._advance(ATTRIBUTE)

    def add_pseudo_class(self, value: str) -> SelectorNode:
        self._check_order(PSEUDO_CLASS)
        self.pseudo_classes.append(str(value))
        return self._advance(PSEUDO_CLASS)

    def set_pseudo_element(self, value: str) -> SelectorNode:
        # Pseudo-element is last, so this check never fires; kept so every
        # setter goes through the same gate.
        self._check_order(PSEUDO_ELEMENT)
        if self.pseudo_element_value is not None:
            raise DuplicatePartError(PART_ORDER[PSEUDO_ELEMENT])
        self.pseudo_element_value = str(value)
        return self._advance(PSEUDO_ELEMENT)

    # CSS-flavoured spellings, so chains read like the selector they build
    element = set_element
    id = id_ = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    def render(self) -> str:
        """Return the selector text. Does not modify the node."""
        parts: list[str] = []
        if self.element_tag is not None:
            parts.append(self.element_tag)
        if self.id_value is not None:
            parts.append(f"#{self.id_value}")
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f"[{attribute}]" for attribute in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_value is not None:
            parts.append(f"::{self.pseudo_element_value}")
        return "".join(parts)

    stringify = render


class CombinedSelector:
    """Two selectors joined by a combinator, frozen at the time they were joined."""

    __slots__ = ("_text", "combinator", "left", "right")

    left: str
    combinator: str
    right: str
    _text: str

    def __init__(self, left: Renderable, combinator: str, right: Renderable) -> None:
        # Store rendered text, not the nodes, so later edits to them don't leak in
        self.left = left.render()
        self.combinator = str(combinator)
        self.right = right.render()
        self._text = f"{self.left} {self.combinator} {self.right}"

    def __repr__(self) -> str:
        return f"CombinedSelector({self._text!r})"

    def __str__(self) -> str:
        return self._text

    def render(self) -> str:
        return self._text

    stringify = render
