"""Email address validators.

The local part may use the RFC 5322 atom characters separated by single
dots; the domain needs at least one dot, labels that start and end with
a letter or digit, and an alphabetic top level domain.
"""

from __future__ import annotations

from validated_primitives.result import ValidationResult
from validated_primitives.validators.base import ValueValidator, compile_pattern, is_blank, matches

_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"

EMAIL_PATTERN = compile_pattern(
    rf"^{_ATOM}(?:\.{_ATOM})*@(?:{_LABEL}\.){{1,127}}[A-Za-z]{{2,}}$"
)

MAX_EMAIL_LENGTH = 256


def email_format(field_name: str = "Email") -> ValueValidator[str]:
    def validate(value: str | None) -> ValidationResult:
        if is_blank(value) or not matches(EMAIL_PATTERN, value):
            return ValidationResult.failure("Invalid email address format.", field_name, "EmailFormat")
        return ValidationResult.success()

    return validate
