# (c) Nelen & Schuurmans

from pydantic import ValidationError
from pydantic_core import ErrorDetails

__all__ = ["InvalidFragment"]


class InvalidFragment(ValueError):
    """Raised when API content cannot be turned into a fragment."""

    def __init__(
        self, err_or_msg: ValidationError | str, type_name: str | None = None
    ):
        self._internal_error = err_or_msg
        self.type_name = type_name
        super().__init__(err_or_msg)

    def errors(self) -> list[ErrorDetails]:
        if isinstance(self._internal_error, ValidationError):
            return self._internal_error.errors()
        return [
            ErrorDetails(
                type="value_error",
                msg=self._internal_error,
                loc=(),
                input=None,
            )
        ]

    def __str__(self) -> str:
        if self.type_name:
            prefix = f"invalid {self.type_name} fragment"
        else:
            prefix = "invalid fragment"
        error = self._internal_error
        if not isinstance(error, ValidationError):
            return f"{prefix}: {error}"
        details = error.errors()[0]
        if details["loc"]:
            loc = ".".join(str(x) for x in details["loc"])
            return f"{prefix}: '{loc}' {details['msg']}"
        return f"{prefix}: {details['msg']}"
