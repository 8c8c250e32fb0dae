from .errors import DecodeError, DuplicatePartError, OrderViolationError, SelectorBuildError
from .node import CombinedSelector, SelectorNode
from .selector import (
    SelectorFacade,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from .serialize import from_json, to_json
from .shapes import Rectangle, make_rectangle

__all__ = [
    "CombinedSelector",
    "DecodeError",
    "DuplicatePartError",
    "OrderViolationError",
    "Rectangle",
    "SelectorBuildError",
    "SelectorFacade",
    "SelectorNode",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "from_json",
    "id_",
    "make_rectangle",
    "pseudo_class",
    "pseudo_element",
    "to_json",
]
