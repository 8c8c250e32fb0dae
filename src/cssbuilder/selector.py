# CSS selector builder facade for cssbuilder
# Builds selector strings; it never parses or matches them

from __future__ import annotations

from .node import CombinedSelector, Renderable, SelectorNode


class SelectorFacade:
    """Entry point for building selectors.

    Each factory starts a new SelectorNode with its first part already
    written; the caller keeps chaining on the returned node::

        builder = SelectorFacade()
        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'

    The facade holds no state, so one instance can be shared freely.
    """

    __slots__ = ()

    def make_element(self, value: str) -> SelectorNode:
        return SelectorNode().set_element(value)

    def make_id(self, value: str) -> SelectorNode:
        return SelectorNode().set_id(value)

    def make_class(self, value: str) -> SelectorNode:
        return SelectorNode().add_class(value)

    def make_attribute(self, value: str) -> SelectorNode:
        return SelectorNode().add_attribute(value)

    def make_pseudo_class(self, value: str) -> SelectorNode:
        return SelectorNode().add_pseudo_class(value)

    def make_pseudo_element(self, value: str) -> SelectorNode:
        return SelectorNode().set_pseudo_element(value)

    element = make_element
    id = id_ = make_id
    class_ = make_class
    attr = make_attribute
    pseudo_class = make_pseudo_class
    pseudo_element = make_pseudo_element

    def combine(self, left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
        """
        Join two selectors with a combinator.

        The combinator is inserted verbatim between single spaces; it is not
        checked against ' ', '+', '~' and '>'. Both sides are rendered now,
        so later changes to them do not affect the result.

        Args:
            left: A SelectorNode or an earlier combine result
            combinator: The combinator text
            right: A SelectorNode or an earlier combine result

        Returns:
            A CombinedSelector that can itself be combined again
        """
        return CombinedSelector(left, combinator, right)


# Global facade instance
css_selector_builder: SelectorFacade = SelectorFacade()


def element(value: str) -> SelectorNode:
    return css_selector_builder.make_element(value)


def id_(value: str) -> SelectorNode:
    return css_selector_builder.make_id(value)


def class_(value: str) -> SelectorNode:
    return css_selector_builder.make_class(value)


def attr(value: str) -> SelectorNode:
    return css_selector_builder.make_attribute(value)


def pseudo_class(value: str) -> SelectorNode:
    return css_selector_builder.make_pseudo_class(value)


def pseudo_element(value: str) -> SelectorNode:
    return css_selector_builder.make_pseudo_element(value)


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Join two selectors with a combinator using the global facade."""
    return css_selector_builder.combine(left, combinator, right)
