"""Login and signup credential records."""

import json
from typing import Dict, List, Protocol


REDACTED = '*****'


class Credential:
    """An email and password pair submitted by a user.

    The password is only reachable through the read-only ``password``
    property and is masked in every textual rendering.
    """

    def __init__(self, email: str, password: str):
        self.email = email
        self._password = password

    @property
    def password(self) -> str:
        return self._password

    def validate(self) -> Dict[str, List[str]]:
        """Run the email and password checks for this kind of credential.

        Returns:
            Mapping of field name to error messages, empty when valid.
        """
        from authforms.forms import validate_credential
        return validate_credential(self)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.email, self._password) == (other.email, other._password)

    def __hash__(self):
        return hash((type(self).__name__, self.email, self._password))

    def __repr__(self):
        email = json.dumps(self.email, ensure_ascii=False)
        return f'{type(self).__name__} {{ email: {email}, password: "{REDACTED}" }}'


class SignupSource(Protocol):
    """Anything that can hand out a signup without giving itself up."""

    def as_signup(self) -> 'Signup':
        ...


class LoginSource(Protocol):
    def as_login(self) -> 'Login':
        ...


class Login(Credential):
    """Credentials for an authentication attempt.

    No strength policy applies: the stored password may predate it.
    """

    @classmethod
    def from_signup(cls, source: SignupSource) -> 'Login':
        """Copy the fields of a signup into a new login.

        Args:
            source: A Signup, or any object exposing one via ``as_signup()``.
        """
        signup = source.as_signup()
        return cls(signup.email, signup.password)

    def as_login(self) -> 'Login':
        return self


class Signup(Credential):
    """Credentials for creating an account."""

    @classmethod
    def from_login(cls, source: LoginSource) -> 'Signup':
        """Copy the fields of a login into a new signup.

        The strength policy is not checked here; call ``validate()`` on the
        result before relying on it.
        """
        login = source.as_login()
        return cls(login.email, login.password)

    def as_signup(self) -> 'Signup':
        return self
