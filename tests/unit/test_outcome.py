"""
Тесты для ValidationOutcome и исключений
"""

import pytest

from src.core.domain import ErrorKind, TypeConstraintError, UnknownTypeError, ValidationOutcome


class TestValidationOutcome:
    """accept / reject / raise_for_reason"""

    def test_accept(self) -> None:
        outcome = ValidationOutcome.accept("Int", 5)

        assert outcome.accepted
        assert outcome.reason is None
        assert outcome.normalized_value == 5
        assert outcome.details == "PASS"
        assert outcome.raise_for_reason() is outcome

    def test_reject(self) -> None:
        outcome = ValidationOutcome.reject("Int", ErrorKind.NOT_FINITE, "nan")

        assert not outcome
        assert outcome.normalized_value is None

        with pytest.raises(TypeConstraintError, match=r"Int: not_finite \(nan\)") as exc_info:
            outcome.raise_for_reason()
        assert exc_info.value.outcome is outcome

    def test_outcome_is_immutable(self) -> None:
        outcome = ValidationOutcome.accept("Int", 5)

        with pytest.raises(AttributeError):
            outcome.accepted = False

    def test_error_kind_values(self) -> None:
        assert ErrorKind.WRONG_NUMERIC_KIND.value == "wrong_numeric_kind"
        assert ErrorKind("insufficient_accuracy") is ErrorKind.INSUFFICIENT_ACCURACY


class TestUnknownTypeError:
    def test_message(self) -> None:
        error = UnknownTypeError("Nope")

        assert isinstance(error, KeyError)
        assert str(error) == "Unknown type name: 'Nope'"
