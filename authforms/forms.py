"""WTForms form definitions for login and signup submissions."""

from typing import Dict, List

import email_validator
from wtforms import Form, StringField, PasswordField, validators

from authforms.credentials import Credential, Login, Signup
from authforms.password_policy import SecurePassword


INVALID_EMAIL = 'invalid email'


class ValidEmail:
    """WTForms validator checking email address syntax.

    Dotless domains, IP-literal domains and the ``test`` domain are accepted.
    Other reserved names such as ``localhost`` are rejected.
    """

    def __call__(self, form, field):
        if not isinstance(field.data, str):
            raise validators.ValidationError(INVALID_EMAIL)
        try:
            email_validator.validate_email(
                field.data,
                check_deliverability=False,
                globally_deliverable=False,
                allow_domain_literal=True,
                test_environment=True,
            )
        except email_validator.EmailNotValidError:
            raise validators.ValidationError(INVALID_EMAIL)


class CredentialForm(Form):
    """Shared email and password fields."""

    email = StringField('Email', [
        ValidEmail()
    ])

    password = PasswordField('Password')

    def _credential_fields(self):
        return self.email.data or '', self.password.data or ''

    def as_login(self) -> Login:
        """Decode the submitted data into a Login, without validating it."""
        return Login(*self._credential_fields())

    def as_signup(self) -> Signup:
        """Decode the submitted data into a Signup, without validating it."""
        return Signup(*self._credential_fields())


class LoginForm(CredentialForm):
    """Login form used to authenticate users."""


class SignupForm(CredentialForm):
    """Signup form used to create new users."""

    password = PasswordField('Password', [
        SecurePassword()
    ])


FORMS = {
    Login: LoginForm,
    Signup: SignupForm,
}


def validate_credential(credential: Credential) -> Dict[str, List[str]]:
    """Validate a credential with the form matching its type.

    Args:
        credential: A Login or Signup instance.

    Returns:
        Mapping of field name to error messages, empty when valid.

    Raises:
        TypeError: If no form handles the credential's type.
    """
    try:
        form_class = FORMS[type(credential)]
    except KeyError:
        raise TypeError(f'No form for {type(credential).__name__}')

    form = form_class(obj=credential)
    form.validate()
    return form.errors
