from .css_selector_builder import (
    Combinator,
    CombinedSelectorError,
    CSSSelectorBuilder,
    DuplicateSingletonError,
    FragmentCategory,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorBuilder,
    SelectorError,
    SelectorFragment,
    css_selector_builder,
)

__version__ = "1.0.0"

__all__ = [
    "Combinator",
    "CombinedSelectorError",
    "CSSSelectorBuilder",
    "DuplicateSingletonError",
    "FragmentCategory",
    "InvalidCombinatorError",
    "OrderViolationError",
    "SelectorBuilder",
    "SelectorError",
    "SelectorFragment",
    "css_selector_builder",
]
