"""Password strength policy applied to signup passwords."""

from typing import NamedTuple, Optional

from wtforms import validators


MIN_LENGTH = 8


class PasswordViolation(NamedTuple):
    """A broken password rule."""

    code: str
    message: str


TOO_SHORT = PasswordViolation(
    'too_short', 'The password must be at least 8 characters long.'
)
NO_UPPERCASE = PasswordViolation(
    'no_uppercase', 'The password must include least one uppercase character.'
)
# Same message as NO_UPPERCASE.
NO_LOWERCASE = PasswordViolation(
    'no_lowercase', 'The password must include least one uppercase character.'
)
NO_DIGIT = PasswordViolation(
    'no_digit', 'The password has to contain at least one digit.'
)


def is_long(password: str) -> bool:
    return len(password) >= MIN_LENGTH


def has_uppercase(password: str) -> bool:
    return any(c.isupper() for c in password)


def has_lowercase(password: str) -> bool:
    return any(c.islower() for c in password)


def has_number(password: str) -> bool:
    return any(c.isnumeric() for c in password)


# Evaluated in order, first failure wins.
RULES = (
    (is_long, TOO_SHORT),
    (has_uppercase, NO_UPPERCASE),
    (has_lowercase, NO_LOWERCASE),
    (has_number, NO_DIGIT),
)


def check_password(password: str) -> Optional[PasswordViolation]:
    """Return the first rule the password breaks.

    Args:
        password: Candidate password for a new account.

    Returns:
        The violated rule, or None if the password is acceptable.
    """
    for predicate, violation in RULES:
        if not predicate(password):
            return violation
    return None


def is_password_secure(password: str) -> bool:
    """Check a password against the whole strength policy."""
    return check_password(password) is None


class SecurePassword:
    """WTForms validator enforcing the password strength policy.

    Only the message of the first broken rule is reported.
    """

    def __call__(self, form, field):
        violation = check_password(field.data or '')
        if violation is not None:
            raise validators.ValidationError(violation.message)
