"""
CSS selector builder for composing compound and complex selectors.

This module provides a fluent builder that accumulates selector fragments (element, id,
class, attribute, pseudo-class and pseudo-element) and renders them as a CSS selector
string. The canonical CSS ordering and the uniqueness of element, id and pseudo-element
fragments are enforced at the call that would break them. Selectors can be joined with
combinators to form complex selectors.
"""

import logging
from enum import IntEnum
from typing import (
    Final,
    FrozenSet,
    List,
    NoReturn,
    Optional,
    Protocol,
    Set,
    Tuple,
    Type,
    TypedDict,
)

# === Constants ===


class Constants:
    """Centralized constants for error messages and other static values."""

    DUPLICATE_SINGLETON_MESSAGE: Final[str] = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )
    ORDER_VIOLATION_MESSAGE: Final[str] = (
        "Selector parts should be arranged in the following order: element, id, "
        "class, attribute, pseudo-class, pseudo-element"
    )
    COMBINED_SELECTOR_MESSAGE: Final[str] = (
        "Fragments cannot be appended to a combined selector"
    )


class Combinator:
    """Combinator tokens accepted by :meth:`SelectorBuilder.combine`."""

    DESCENDANT: Final[str] = " "
    CHILD: Final[str] = ">"
    ADJACENT_SIBLING: Final[str] = "+"
    GENERAL_SIBLING: Final[str] = "~"
    ALL: Final[Tuple[str, ...]] = (
        DESCENDANT,
        CHILD,
        ADJACENT_SIBLING,
        GENERAL_SIBLING,
    )


class FragmentCategory(IntEnum):
    """Selector fragment kinds; the value is the rank in canonical CSS order."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


SINGLETON_CATEGORIES: Final[FrozenSet[FragmentCategory]] = frozenset(
    {
        FragmentCategory.ELEMENT,
        FragmentCategory.ID,
        FragmentCategory.PSEUDO_ELEMENT,
    }
)

# === Exceptions ===


class SelectorError(Exception):
    """Base exception for invalid selector construction."""


class DuplicateSingletonError(SelectorError):
    """Raised when an element, id or pseudo-element is added twice."""


class OrderViolationError(SelectorError):
    """Raised when a fragment is added out of canonical CSS order."""


class InvalidCombinatorError(SelectorError):
    """Raised when combine() receives an unknown combinator token."""


class CombinedSelectorError(SelectorError):
    """Raised when a fragment is appended to a combined selector."""


# === Protocols ===


class RenderableProtocol(Protocol):
    """Protocol for anything that can be used as an operand of combine()."""

    def render(self) -> str:
        """Return the selector text (e.g., 'div#main')."""
        ...


# === Core Data Structures ===


class SelectorFragmentDict(TypedDict):
    """Typed dictionary for representing a selector fragment."""

    category: str
    text: str


class SelectorFragment:
    """A single rendered piece of a selector together with its category."""

    def __init__(self, category: FragmentCategory, text: str) -> None:
        """
        Initialize a selector fragment.

        Args:
            category: The fragment kind, which also determines its rank.
            text: The rendered form (e.g., '.container', '[href]', '::before').
        """
        self.category: FragmentCategory = category
        self.text: str = text

    def __repr__(self) -> str:
        """Return a string representation of the fragment."""
        return f"SelectorFragment({self.category.name}, {self.text!r})"

    def __hash__(self) -> int:
        return hash((self.category, self.text))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorFragment):
            return False
        return self.category == other.category and self.text == other.text

    def to_dict(self) -> SelectorFragmentDict:
        """Convert the fragment to a dictionary."""
        return {"category": self.category.name.lower(), "text": self.text}


# === Builder ===


class SelectorBuilder:
    """Fluent builder accumulating fragments into a CSS selector."""

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._fragments: List[SelectorFragment] = []
        self._seen_singletons: Set[FragmentCategory] = set()
        self._last_rank: int = -1
        self._combined_parts: Optional[List[str]] = None
        self._logger: logging.Logger = logging.getLogger(__name__)

    @property
    def fragments(self) -> Tuple[SelectorFragment, ...]:
        """Fragments appended so far, in call order."""
        return tuple(self._fragments)

    @property
    def is_combined(self) -> bool:
        """True if this builder holds the result of combine()."""
        return self._combined_parts is not None

    def element(self, name: str) -> "SelectorBuilder":
        """
        Append a type selector.

        Args:
            name: The element name (e.g., 'div').

        Returns:
            SelectorBuilder: This builder, for chaining.

        Raises:
            DuplicateSingletonError: If an element was already added.
            OrderViolationError: If a higher-ranked fragment was already added.
        """
        return self._append(FragmentCategory.ELEMENT, name)

    def id(self, name: str) -> "SelectorBuilder":
        """
        Append an id selector rendered as ``#name``.

        Raises:
            DuplicateSingletonError: If an id was already added.
            OrderViolationError: If a higher-ranked fragment was already added.
        """
        return self._append(FragmentCategory.ID, f"#{name}")

    def class_(self, name: str) -> "SelectorBuilder":
        """Append a class selector rendered as ``.name``. Repeatable."""
        return self._append(FragmentCategory.CLASS, f".{name}")

    def attr(self, spec: str) -> "SelectorBuilder":
        """
        Append an attribute selector rendered as ``[spec]``. Repeatable.

        Args:
            spec: Full attribute selector syntax, passed through verbatim
                (e.g., 'href$=".png"').
        """
        return self._append(FragmentCategory.ATTRIBUTE, f"[{spec}]")

    def pseudo_class(self, name: str) -> "SelectorBuilder":
        """Append a pseudo-class rendered as ``:name``. Repeatable."""
        return self._append(FragmentCategory.PSEUDO_CLASS, f":{name}")

    def pseudo_element(self, name: str) -> "SelectorBuilder":
        """Append a pseudo-element rendered as ``::name``. Allowed once."""
        return self._append(FragmentCategory.PSEUDO_ELEMENT, f"::{name}")

    @classmethod
    def combine(
        cls,
        left: RenderableProtocol,
        token: str,
        right: RenderableProtocol,
    ) -> "SelectorBuilder":
        """
        Join two selectors with a combinator into a new complex selector.

        The token is padded by one space on each side, so the descendant
        combinator renders as three spaces. Operands are rendered as they are;
        their own ordering is not validated again.

        Args:
            left: The selector on the left of the combinator.
            token: One of ' ', '>', '+', '~'.
            right: The selector on the right of the combinator.

        Returns:
            SelectorBuilder: A new, sealed builder holding the complex selector.

        Raises:
            InvalidCombinatorError: If the token is not a known combinator.
        """
        combined = cls()
        if token not in Combinator.ALL:
            accepted = ", ".join(repr(t) for t in Combinator.ALL)
            error_msg = f"Invalid combinator {token!r}: expected one of {accepted}"
            combined._logger.warning(error_msg)
            raise InvalidCombinatorError(error_msg)
        combined._combined_parts = [left.render(), f" {token} ", right.render()]
        combined._logger.debug(f"Combined selector: {combined.render()}")
        return combined

    def render(self) -> str:
        """
        Render the selector without modifying the builder.

        Returns:
            str: The selector text.
        """
        if self._combined_parts is not None:
            return "".join(self._combined_parts)
        return "".join(fragment.text for fragment in self._fragments)

    def stringify(self) -> str:
        """Alias of :meth:`render`."""
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        """Return a string representation of the builder."""
        return f"{type(self).__name__}({self.render()!r})"

    def _append(self, category: FragmentCategory, text: str) -> "SelectorBuilder":
        """
        Validate and append a fragment. State is left untouched on failure.

        Args:
            category: The fragment category.
            text: The rendered fragment text.

        Returns:
            SelectorBuilder: This builder.
        """
        if self._combined_parts is not None:
            self._fail(CombinedSelectorError, Constants.COMBINED_SELECTOR_MESSAGE)
        if category in SINGLETON_CATEGORIES and category in self._seen_singletons:
            self._fail(DuplicateSingletonError, Constants.DUPLICATE_SINGLETON_MESSAGE)
        if category < self._last_rank:
            self._fail(OrderViolationError, Constants.ORDER_VIOLATION_MESSAGE)

        if category in SINGLETON_CATEGORIES:
            self._seen_singletons.add(category)
        self._last_rank = max(self._last_rank, int(category))
        self._fragments.append(SelectorFragment(category, text))
        self._logger.debug(f"Appended {category.name.lower()} fragment: {text}")
        return self

    def _fail(self, error_class: Type[SelectorError], message: str) -> NoReturn:
        self._logger.warning(f"Error: {message} (selector so far: {self.render()!r})")
        raise error_class(message)


# === Facade ===


class CSSSelectorBuilder:
    """Facade creating a fresh selector builder for every call."""

    def __init__(self, builder_class: Type[SelectorBuilder] = SelectorBuilder) -> None:
        """
        Initialize the facade.

        Args:
            builder_class: Builder type used for every selector created, by default
                SelectorBuilder.
        """
        self._builder_class: Type[SelectorBuilder] = builder_class
        self._logger: logging.Logger = logging.getLogger(__name__)

    def element(self, name: str) -> SelectorBuilder:
        """Start a selector with a type selector."""
        return self._builder_class().element(name)

    def id(self, name: str) -> SelectorBuilder:
        """Start a selector with an id selector."""
        return self._builder_class().id(name)

    def class_(self, name: str) -> SelectorBuilder:
        """Start a selector with a class selector."""
        return self._builder_class().class_(name)

    def attr(self, spec: str) -> SelectorBuilder:
        """Start a selector with an attribute selector."""
        return self._builder_class().attr(spec)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        """Start a selector with a pseudo-class."""
        return self._builder_class().pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        """Start a selector with a pseudo-element."""
        return self._builder_class().pseudo_element(name)

    def combine(
        self, left: RenderableProtocol, token: str, right: RenderableProtocol
    ) -> SelectorBuilder:
        """
        Join two selectors with a combinator.

        Args:
            left: The left selector.
            token: One of ' ', '>', '+', '~'.
            right: The right selector.

        Returns:
            SelectorBuilder: A new builder holding the complex selector.
        """
        self._logger.debug(f"Combining selectors with {token!r}")
        return self._builder_class.combine(left, token, right)


css_selector_builder: Final[CSSSelectorBuilder] = CSSSelectorBuilder()
