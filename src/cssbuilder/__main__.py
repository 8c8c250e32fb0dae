#!/usr/bin/env python3
"""Command-line interface for cssbuilder."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, NoReturn

from .errors import SelectorBuildError
from .node import CombinedSelector, SelectorNode
from .selector import css_selector_builder

# (kind, value) pairs in the order they appeared on the command line
Step = tuple[str, str]

_SETTERS = {
    "element": SelectorNode.set_element,
    "id": SelectorNode.set_id,
    "class": SelectorNode.add_class,
    "attribute": SelectorNode.add_attribute,
    "pseudo-class": SelectorNode.add_pseudo_class,
    "pseudo-element": SelectorNode.set_pseudo_element,
}


def _get_version() -> str:
    try:
        return version("cssbuilder")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


class _StepAction(argparse.Action):
    """Append (kind, value) to a shared list so flag order is preserved."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        steps: list[Step] | None = getattr(namespace, self.dest, None)
        if steps is None:
            steps = []
            setattr(namespace, self.dest, steps)
        steps.append((self.const, values))


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cssbuilder",
        description="Build a CSS selector from its parts, in the order given.",
        epilog=(
            "Examples:\n"
            "  cssbuilder --id main --class container --class editable\n"
            "  cssbuilder --element a --attr 'href$=\".png\"' --pseudo-class focus\n"
            "  cssbuilder --element div --combine + --element table\n"
            "\n"
            "If you don't have the 'cssbuilder' command available, use:\n"
            "  python -m cssbuilder ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    for flag, kind, help_text in (
        ("--element", "element", "Element (type) selector, e.g. div"),
        ("--id", "id", "Id selector, written without '#'"),
        ("--class", "class", "Class selector, written without '.'; repeatable"),
        ("--attr", "attribute", "Attribute selector text, written without brackets; repeatable"),
        ("--pseudo-class", "pseudo-class", "Pseudo-class, written without ':'; repeatable"),
        ("--pseudo-element", "pseudo-element", "Pseudo-element, written without '::'"),
        ("--combine", "combine", "Finish the current selector and join the next one with this combinator"),
    ):
        parser.add_argument(flag, action=_StepAction, dest="steps", const=kind, metavar="VALUE", help=help_text)

    parser.add_argument(
        "--version",
        action="version",
        version=f"cssbuilder {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not getattr(args, "steps", None):
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def build(steps: list[Step]) -> str:
    """Apply steps to fresh nodes, joining them at each combine step."""
    builder = css_selector_builder
    factories = {
        "element": builder.make_element,
        "id": builder.make_id,
        "class": builder.make_class,
        "attribute": builder.make_attribute,
        "pseudo-class": builder.make_pseudo_class,
        "pseudo-element": builder.make_pseudo_element,
    }

    result: SelectorNode | CombinedSelector | None = None
    pending: str = ""
    current: SelectorNode | None = None

    for kind, value in steps:
        if kind == "combine":
            if current is None:
                raise SelectorBuildError(message="--combine needs a selector on its left")
            result = current if result is None else builder.combine(result, pending, current)
            pending = value
            current = None
            continue

        if current is None:
            current = factories[kind](value)
            continue

        _SETTERS[kind](current, value)

    if current is None:
        raise SelectorBuildError(message="--combine needs a selector on its right")
    if result is None:
        return current.render()
    return builder.combine(result, pending, current).render()


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])

    try:
        selector = build(args.steps)
    except SelectorBuildError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    sys.stdout.write(selector)
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
