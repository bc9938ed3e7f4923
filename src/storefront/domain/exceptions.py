"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the web and CLI layers can catch them uniformly and map them to a status
code or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input or a uniqueness rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthenticationError(DomainException):
    """Credentials did not match.

    The message is always generic: it never says whether the username
    or the password was wrong.
    """


class AuthorizationError(DomainException):
    """The action requires a signed-in user."""


class EmptyCartError(DomainException):
    """Checkout was attempted with nothing in the cart."""


class PaymentDeclinedError(DomainException):
    """The payment gateway refused to authorize the order total."""
