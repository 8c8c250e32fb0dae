"""Tests for SelectorNode ordering, cardinality and rendering."""

import pytest

from cssbuilder.errors import DuplicatePartError, OrderViolationError, SelectorBuildError
from cssbuilder.node import CombinedSelector, SelectorNode


class TestRender:
    def test_empty_node_renders_empty_string(self):
        assert SelectorNode().render() == ""

    def test_every_part_in_category_order(self):
        node = (
            SelectorNode()
            .set_element("a")
            .set_id("nav")
            .add_class("link")
            .add_class("active")
            .add_attribute("href")
            .add_attribute('target="_blank"')
            .add_pseudo_class("hover")
            .add_pseudo_class("focus")
            .set_pseudo_element("after")
        )
        assert node.render() == 'a#nav.link.active[href][target="_blank"]:hover:focus::after'

    def test_repeatable_parts_keep_append_order(self):
        assert SelectorNode().add_class("a").add_class("b").render() == ".a.b"

    def test_render_is_idempotent(self):
        node = SelectorNode().set_id("main").add_class("container")
        assert node.render() == node.render() == "#main.container"

    def test_stringify_and_str_match_render(self):
        node = SelectorNode().set_element("li").add_pseudo_class("nth-of-type(even)")
        assert node.stringify() == node.render()
        assert str(node) == "li:nth-of-type(even)"
        assert repr(node) == "SelectorNode('li:nth-of-type(even)')"

    def test_values_are_coerced_to_str(self):
        assert SelectorNode().add_pseudo_class(1).render() == ":1"

    def test_short_aliases_chain(self):
        node = SelectorNode().element("p").id("intro").class_("lead").attr("lang").pseudo_class("first-line")
        node.pseudo_element("before")
        assert node.render() == "p#intro.lead[lang]:first-line::before"

    def test_skipping_categories_is_allowed(self):
        assert SelectorNode().set_element("div").add_pseudo_class("hover").render() == "div:hover"
        assert SelectorNode().set_id("x").set_pseudo_element("marker").render() == "#x::marker"


class TestDuplicates:
    @pytest.mark.parametrize(
        ("method", "first", "second"),
        [
            ("set_element", "div", "span"),
            ("set_id", "main", "other"),
            ("set_pseudo_element", "before", "after"),
        ],
    )
    def test_second_write_fails_and_keeps_first(self, method, first, second):
        node = SelectorNode()
        getattr(node, method)(first)
        before = node.render()

        with pytest.raises(DuplicatePartError):
            getattr(node, method)(second)

        assert node.render() == before

    def test_duplicate_element_reported_before_order(self):
        node = SelectorNode().set_element("div").add_class("x")
        with pytest.raises(DuplicatePartError):
            node.set_element("span")

    def test_error_carries_part_and_code(self):
        node = SelectorNode().set_id("a")
        with pytest.raises(DuplicatePartError) as exc_info:
            node.set_id("b")
        assert exc_info.value.part == "id"
        assert exc_info.value.code == "duplicate-part"
        assert isinstance(exc_info.value, ValueError)


class TestOrder:
    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def test_class_after_attribute(self):
        node = SelectorNode().add_class("a").add_attribute("href")
        with pytest.raises(OrderViolationError) as exc_info:
            node.add_class("b")
        assert str(exc_info.value) == self.MESSAGE
        assert node.render() == ".a[href]"

    def test_id_after_class(self):
        node = SelectorNode().set_element("div").add_class("x")
        with pytest.raises(OrderViolationError):
            node.set_id("y")
        assert node.render() == "div.x"

    def test_element_after_id(self):
        with pytest.raises(OrderViolationError):
            SelectorNode().set_id("main").set_element("div")

    def test_attribute_after_pseudo_class(self):
        with pytest.raises(OrderViolationError):
            SelectorNode().add_pseudo_class("hover").add_attribute("href")

    def test_pseudo_class_after_pseudo_element(self):
        with pytest.raises(OrderViolationError):
            SelectorNode().set_pseudo_element("after").add_pseudo_class("hover")

    def test_element_after_pseudo_element(self):
        node = SelectorNode().set_pseudo_element("after")
        with pytest.raises(OrderViolationError) as exc_info:
            node.set_element("p")
        assert exc_info.value.part == "element"
        assert node.render() == "::after"

    def test_failed_write_does_not_move_rank(self):
        node = SelectorNode().set_element("div").add_attribute("title")
        with pytest.raises(OrderViolationError):
            node.add_class("x")
        node.add_attribute("lang").add_pseudo_class("hover")
        assert node.render() == "div[title][lang]:hover"

    def test_both_errors_share_a_base(self):
        assert issubclass(OrderViolationError, SelectorBuildError)
        assert issubclass(DuplicatePartError, SelectorBuildError)


class TestCombinedSelector:
    def test_joins_with_spaces(self):
        left = SelectorNode().set_element("ul")
        right = SelectorNode().set_element("li")
        assert CombinedSelector(left, ">", right).render() == "ul > li"

    def test_snapshot_ignores_later_mutation(self):
        left = SelectorNode().set_element("div")
        right = SelectorNode().set_element("table")
        combined = CombinedSelector(left, "+", right)

        left.add_class("late")
        right.set_id("late")

        assert combined.render() == "div + table"
        assert combined.left == "div"
        assert combined.right == "table"
        assert combined.combinator == "+"

    def test_str_and_repr(self):
        combined = CombinedSelector(SelectorNode().set_element("a"), "~", SelectorNode().set_element("b"))
        assert str(combined) == combined.stringify() == "a ~ b"
        assert repr(combined) == "CombinedSelector('a ~ b')"
