from .builder import EMPTY, FragmentKind, SelectorBuilder, SelectorExpression, css_selector_builder
from .errors import DuplicateFragmentError, OrderViolationError, SelectorBuildError, generate_error_message

builder = css_selector_builder

__all__ = [
    "EMPTY",
    "DuplicateFragmentError",
    "FragmentKind",
    "OrderViolationError",
    "SelectorBuildError",
    "SelectorBuilder",
    "SelectorExpression",
    "builder",
    "css_selector_builder",
    "generate_error_message",
]
