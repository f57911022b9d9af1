# CSS selector builder
# Composes selector strings while enforcing compound selector grammar

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, NoReturn

from .errors import DuplicateFragmentError, OrderViolationError


class FragmentKind:
    """Fragment categories, numbered in the order they must appear."""

    ELEMENT: int = 0  # div
    ID: int = 1  # #main
    CLASS: int = 2  # .container
    ATTRIBUTE: int = 3  # [href$=".png"]
    PSEUDO_CLASS: int = 4  # :focus
    PSEUDO_ELEMENT: int = 5  # ::before

    ORDER: tuple[int, ...] = (ELEMENT, ID, CLASS, ATTRIBUTE, PSEUDO_CLASS, PSEUDO_ELEMENT)
    SINGLETONS: frozenset[int] = frozenset((ELEMENT, ID, PSEUDO_ELEMENT))

    _NAMES: tuple[str, ...] = ("element", "id", "class", "attribute", "pseudo-class", "pseudo-element")

    @classmethod
    def name(cls, kind: int) -> str:
        return cls._NAMES[kind]


class SelectorExpression:
    """An immutable, possibly partial, CSS selector.

    Every fragment method returns a new expression; the receiver is never
    modified, so one expression may start several divergent chains.
    """

    __slots__ = ("kinds", "text")

    text: str
    kinds: frozenset[int]

    def __init__(self, text: str = "", kinds: Iterable[int] = ()) -> None:
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "kinds", frozenset(kinds))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"SelectorExpression is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"SelectorExpression is immutable, cannot delete {name!r}")

    def __reduce__(self) -> tuple[type[SelectorExpression], tuple[str, frozenset[int]]]:
        # copy and pickle would otherwise restore slots through __setattr__
        return (SelectorExpression, (self.text, self.kinds))

    def __repr__(self) -> str:
        return f"SelectorExpression({self.text!r})"

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorExpression):
            return NotImplemented
        return self.text == other.text and self.kinds == other.kinds

    def __hash__(self) -> int:
        return hash((self.text, self.kinds))

    # Flags

    @property
    def has_element(self) -> bool:
        return FragmentKind.ELEMENT in self.kinds

    @property
    def has_id(self) -> bool:
        return FragmentKind.ID in self.kinds

    @property
    def has_class(self) -> bool:
        return FragmentKind.CLASS in self.kinds

    @property
    def has_attribute(self) -> bool:
        return FragmentKind.ATTRIBUTE in self.kinds

    @property
    def has_pseudo_class(self) -> bool:
        return FragmentKind.PSEUDO_CLASS in self.kinds

    @property
    def has_pseudo_element(self) -> bool:
        return FragmentKind.PSEUDO_ELEMENT in self.kinds

    def _append(self, kind: int, fragment: str) -> SelectorExpression:
        """Return a new expression with *fragment* of category *kind* appended."""
        # Uniqueness is checked before ordering
        if kind in FragmentKind.SINGLETONS and kind in self.kinds:
            raise DuplicateFragmentError(FragmentKind.name(kind))
        if any(seen > kind for seen in self.kinds):
            raise OrderViolationError(FragmentKind.name(kind))
        return SelectorExpression(self.text + fragment, self.kinds | {kind})

    def element(self, value: str) -> SelectorExpression:
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorExpression:
        return self._append(FragmentKind.ID, f"#{value}")

    def class_(self, value: str) -> SelectorExpression:
        return self._append(FragmentKind.CLASS, f".{value}")

    def attr(self, value: str) -> SelectorExpression:
        return self._append(FragmentKind.ATTRIBUTE, f"[{value}]")

    def pseudo_class(self, value: str) -> SelectorExpression:
        return self._append(FragmentKind.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> SelectorExpression:
        return self._append(FragmentKind.PSEUDO_ELEMENT, f"::{value}")

    def combine(self, left: SelectorExpression, combinator: str, right: SelectorExpression) -> SelectorExpression:
        """
        Join two selectors with a combinator.

        The combinator (' ', '>', '+', '~') is inserted verbatim with one
        space on each side. The result has no fragment flags set, whatever
        the receiver's state.

        Args:
            left: The selector before the combinator
            combinator: The combinator token
            right: The selector after the combinator

        Returns:
            A new expression holding only the joined string
        """
        return SelectorExpression(f"{left.stringify()} {combinator} {right.stringify()}")

    def stringify(self) -> str:
        return self.text


# Root of every derivation chain
EMPTY: SelectorExpression = SelectorExpression()


class SelectorBuilder:
    """Stateless entry point; every call starts from the empty expression."""

    __slots__ = ()

    def element(self, value: str) -> SelectorExpression:
        return EMPTY.element(value)

    def id(self, value: str) -> SelectorExpression:
        return EMPTY.id(value)

    def class_(self, value: str) -> SelectorExpression:
        return EMPTY.class_(value)

    def attr(self, value: str) -> SelectorExpression:
        return EMPTY.attr(value)

    def pseudo_class(self, value: str) -> SelectorExpression:
        return EMPTY.pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorExpression:
        return EMPTY.pseudo_element(value)

    def combine(self, left: SelectorExpression, combinator: str, right: SelectorExpression) -> SelectorExpression:
        return EMPTY.combine(left, combinator, right)

    def stringify(self) -> str:
        return EMPTY.stringify()


# Global builder instance
css_selector_builder: SelectorBuilder = SelectorBuilder()
