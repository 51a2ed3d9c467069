"""Tests for the validation result model."""

import dataclasses

import pytest

from validated_primitives.result import ValidationError, ValidationResult


class TestValidationError:
    """Tests for ValidationError."""

    def test_str_with_member_name(self):
        error = ValidationError("must be set", "Email", "Required")
        assert str(error) == "Email: must be set"

    def test_str_without_member_name(self):
        assert str(ValidationError("must be set")) == "must be set"

    def test_is_immutable(self):
        error = ValidationError("must be set", "Email", "Required")
        with pytest.raises(dataclasses.FrozenInstanceError):
            error.message = "changed"

    def test_to_dict(self):
        error = ValidationError("bad", "Iban", "InvalidIbanChecksum")
        assert error.to_dict() == {"message": "bad", "member_name": "Iban", "code": "InvalidIbanChecksum"}


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_success_is_valid(self):
        result = ValidationResult.success()
        assert result.is_valid
        assert result.errors == ()
        assert bool(result) is True
        assert len(result) == 0

    def test_failure_has_exactly_one_error(self):
        result = ValidationResult.failure("bad", "Field", "Code")
        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.codes == ["Code"]
        assert bool(result) is False

    def test_merge_appends_in_order_and_returns_receiver(self):
        first = ValidationResult.failure("one", "A", "C1")
        second = ValidationResult.failure("two", "B", "C2")
        merged = first.merge(second)
        assert merged is first
        assert [e.message for e in merged] == ["one", "two"]

    def test_merge_none_is_noop(self):
        result = ValidationResult.failure("one")
        result.merge(None)
        assert len(result) == 1

    def test_merge_success_keeps_validity(self):
        result = ValidationResult.success().merge(ValidationResult.success())
        assert result.is_valid

    def test_validity_is_commutative(self):
        a = ValidationResult.failure("a")
        b = ValidationResult.success()
        left = ValidationResult.success().merge(a).merge(b)
        right = ValidationResult.success().merge(b).merge(a)
        assert left.is_valid == right.is_valid

    def test_add_error(self):
        result = ValidationResult.success().add_error("bad", "Field", "Code")
        assert result.errors == (ValidationError("bad", "Field", "Code"),)

    def test_errors_view_is_read_only(self):
        result = ValidationResult.failure("bad")
        errors = result.errors
        assert isinstance(errors, tuple)
        result.add_error("worse")
        assert len(errors) == 1

    def test_to_single_message(self):
        result = ValidationResult.failure("first", "A").add_error("second")
        assert result.to_single_message() == "A: first; second"
        assert result.to_single_message(" | ") == "A: first | second"
        assert ValidationResult.success().to_single_message() == ""

    def test_to_bullet_list(self):
        result = ValidationResult.failure("first", "A").add_error("second", "B")
        assert result.to_bullet_list() == " - A: first\n - B: second"

    def test_to_dict_groups_by_member(self):
        result = (
            ValidationResult.failure("first", "A")
            .add_error("second", "B")
            .add_error("third", "A")
            .add_error("unnamed")
        )
        assert result.to_dict() == {"A": ["first", "third"], "B": ["second"], "": ["unnamed"]}

    def test_equality(self):
        assert ValidationResult.failure("x", "A", "C") == ValidationResult.failure("x", "A", "C")
        assert ValidationResult.success() != ValidationResult.failure("x")
