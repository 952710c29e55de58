"""Error taxonomy for registration and parsing.

Every failure the package reports is a subclass of ``GetenvError`` so
callers can catch the whole family in one place, or pick out the exact
kind when they need to react differently:

- **Registration errors** — ``NameInvalidError``, ``ValueInvalidError``,
  ``NameAlreadyRegisteredError``, ``TargetAlreadyBoundError``.
- **Parse errors** — ``RequiredMissingError`` and
  ``InvalidEnvironmentVariableError``.

Errors are always raised to the immediate caller.  Nothing here is
logged or swallowed on the way out.
"""


class GetenvError(Exception):
    """Base class for every error raised by py_getenv."""


class NameInvalidError(GetenvError):
    """Raise when a variable name fails the identifier grammar."""

    def __init__(self, name: str) -> None:
        """Create the error for the rejected *name*."""
        self.name = name
        super().__init__(
            "name must be a non-empty string of [0-9A-Za-z_] that does not start with a digit"
        )


class ValueInvalidError(GetenvError):
    """Raise when a registration target is not a supported typed cell."""

    def __init__(self, detail: str = "") -> None:
        """Create the error, optionally with extra *detail*."""
        msg = (
            "value must be a Var of one of: string, bool, uintptr, "
            "8-64 bit int or uint and 32-64 bit float"
        )
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class NameAlreadyRegisteredError(GetenvError):
    """Raise when a name is registered a second time."""

    def __init__(self, name: str) -> None:
        """Create the error for the duplicate *name*."""
        self.name = name
        super().__init__(f"name {name!r} is already registered")


class TargetAlreadyBoundError(GetenvError):
    """Raise when the same Var object is registered twice."""

    def __init__(self, holder: str) -> None:
        """Create the error naming the variable that already holds the target."""
        self.holder = holder
        super().__init__(f"value already in use by {holder!r}")


class RequiredMissingError(GetenvError):
    """Raise when a required variable is absent or blank at parse time."""

    def __init__(self, name: str) -> None:
        """Create the error for the missing *name*."""
        self.name = name
        super().__init__(f"environment variable {name!r} is required but not defined")


class InvalidEnvironmentVariableError(GetenvError):
    """Raise when a present variable fails conversion or validation.

    Attributes:
        name: The environment variable name.
        value: The (trimmed) raw value that was rejected.
        reason: The failure message from the conversion or check strategy.

    """

    def __init__(self, name: str, value: str, reason: str) -> None:
        """Create the error from the variable, its raw value, and the failure."""
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"invalid environment variable {name}={value}: {reason}")
