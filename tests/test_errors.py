"""Tests for selector build error messages."""

from cssbuilder.errors import (
    DuplicateFragmentError,
    OrderViolationError,
    SelectorBuildError,
    generate_error_message,
)


def test_duplicate_fragment_message():
    assert generate_error_message("duplicate-fragment") == (
        "Element, id and pseudo-element should not occur more then one time inside the selector"
    )


def test_order_violation_message():
    assert generate_error_message("order-violation") == (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )


def test_message_with_kind():
    message = generate_error_message("duplicate-fragment", "id")
    assert message.endswith("(id already present)")


def test_unknown_code_falls_back_to_code():
    assert generate_error_message("no-such-code") == "no-such-code"
    assert generate_error_message("no-such-code", "id") == "no-such-code"


def test_error_hierarchy():
    assert issubclass(DuplicateFragmentError, SelectorBuildError)
    assert issubclass(OrderViolationError, SelectorBuildError)
    assert issubclass(SelectorBuildError, ValueError)


def test_error_without_kind():
    error = OrderViolationError()
    assert error.kind is None
    assert str(error) == generate_error_message("order-violation")
