"""
Custom matchers for common assertions.

Each matcher is a pure predicate ``(received, *args, is_not=False)``
returning a MatchResult. The message always describes the expectation
from the caller's point of view, so it reads "not" when negated.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

_MISSING = object()


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a matcher: whether it passed and why."""

    passed: bool
    message: str


def _not(is_not: bool) -> str:
    return "not " if is_not else ""


def _class_names(element: Any) -> Optional[set[str]]:
    class_list = getattr(element, "class_list", _MISSING)
    if class_list is _MISSING:
        getter = getattr(element, "get", None)
        if not callable(getter):
            return None
        class_list = getter("class")
    if class_list is None:
        return None
    if isinstance(class_list, str):
        return set(class_list.split())
    return set(class_list)


def _attribute(element: Any, name: str) -> Any:
    get_attribute = getattr(element, "get_attribute", None)
    if callable(get_attribute):
        return get_attribute(name)
    getter = getattr(element, "get", None)
    if callable(getter):
        return getter(name)
    return None


def to_have_class(element: Any, class_name: str, *, is_not: bool = False) -> MatchResult:
    """Pass if the element's class list contains ``class_name``."""
    names = _class_names(element)
    return MatchResult(
        passed=names is not None and class_name in names,
        message=f'Expected element {_not(is_not)}to have class "{class_name}"',
    )


def to_have_attribute(
    element: Any, name: str, value: Any = None, *, is_not: bool = False
) -> MatchResult:
    """Pass if the attribute exists, or equals ``value`` when one is given."""
    actual = _attribute(element, name)
    if value is None:
        passed = actual is not None
        suffix = ""
    else:
        passed = actual == value
        suffix = f' with value "{value}"'
    return MatchResult(
        passed=passed,
        message=f'Expected element {_not(is_not)}to have attribute "{name}"{suffix}',
    )


def to_have_been_called_with_args(
    mock: Any, *expected_args: Any, is_not: bool = False
) -> MatchResult:
    """Pass if any recorded call starts with ``expected_args``, position by position."""
    calls = getattr(mock, "call_args_list", None) or []
    expected = list(expected_args)
    matched = any(
        len(call.args) >= len(expected)
        and all(actual == wanted for actual, wanted in zip(call.args, expected))
        for call in calls
    )
    return MatchResult(
        passed=matched,
        message=(
            f"Expected function {_not(is_not)}to have been called with arguments: "
            f"{expected!r}"
        ),
    )


def to_be_valid_date(value: Any, *, is_not: bool = False) -> MatchResult:
    """Pass for date/datetime values that are not a not-a-time sentinel."""
    # pandas.NaT subclasses datetime and, like NaN, is unequal to itself
    valid = isinstance(value, date) and value == value
    return MatchResult(
        passed=valid,
        message=f"Expected {_not(is_not)}to be a valid date",
    )


def to_have_required_keys(
    obj: Any, required_keys: Iterable[Any], *, is_not: bool = False
) -> MatchResult:
    """Pass if every required key is among the object's own keys."""
    required = list(required_keys)
    if isinstance(obj, Mapping):
        keys = set(obj.keys())
    else:
        keys = set(vars(obj)) if hasattr(obj, "__dict__") else set()
    return MatchResult(
        passed=all(key in keys for key in required),
        message=(
            f"Expected object {_not(is_not)}to have all required keys: "
            f"{', '.join(map(str, required))}"
        ),
    )


BUILTIN_MATCHERS = {
    "to_have_class": to_have_class,
    "to_have_attribute": to_have_attribute,
    "to_have_been_called_with_args": to_have_been_called_with_args,
    "to_be_valid_date": to_be_valid_date,
    "to_have_required_keys": to_have_required_keys,
}
