import logging
import sys
from typing import List, Tuple

from css_selector_builder import (
    Combinator,
    SelectorBuilder,
    SelectorError,
    css_selector_builder as builder,
)


def build_examples() -> List[Tuple[str, SelectorBuilder]]:
    """Build a handful of selectors covering every fragment kind and combinator."""
    card = builder.element("article").class_("card").class_("featured")
    return [
        ("id with classes", builder.id("main").class_("container").class_("editable")),
        (
            "attribute and state",
            builder.element("a").attr('href$=".png"').pseudo_class("focus"),
        ),
        ("pseudo-element", builder.element("p").class_("lead").pseudo_element("first-line")),
        (
            "complex selector",
            builder.combine(
                builder.element("div").id("main").class_("container"),
                Combinator.ADJACENT_SIBLING,
                builder.combine(
                    builder.element("table").id("data"),
                    Combinator.GENERAL_SIBLING,
                    builder.combine(
                        builder.element("tr").pseudo_class("nth-of-type(even)"),
                        Combinator.DESCENDANT,
                        builder.element("td").pseudo_class("nth-of-type(even)"),
                    ),
                ),
            ),
        ),
        ("child of card", builder.combine(card, Combinator.CHILD, builder.element("h2"))),
    ]


def show_rejected() -> None:
    """Demonstrate the errors raised for invalid chains."""
    attempts = [
        ("second id", lambda: builder.element("div").id("main").class_("x").id("y")),
        ("element after class", lambda: builder.class_("a").element("div")),
        ("unknown combinator", lambda: builder.combine(builder.id("a"), "|", builder.id("b"))),
    ]
    for label, attempt in attempts:
        try:
            attempt()
        except SelectorError as e:
            print(f"{label:>22}: {type(e).__name__}: {e}")


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    for label, selector in build_examples():
        print(f"{label:>22}: {selector.render()}")
    show_rejected()
    return 0


if __name__ == "__main__":
    sys.exit(main())
