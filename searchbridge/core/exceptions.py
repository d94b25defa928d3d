__all__ = [
    "BaseError",
    "BadRequestError",
    "LoadError",
    "MissingFilterValueError",
    "NotSupportedError",
    "TransportFailureError",
    "UnresolvedFieldError",
    "UnsupportedOperatorError",
]


class BaseError(Exception):
    status_code: int


class BadRequestError(BaseError):
    status_code = 400


class NotSupportedError(BaseError):
    status_code = 415


class UnsupportedOperatorError(BadRequestError):
    """Condition operator has no clause mapping."""

    field: str
    operator: str

    def __init__(self, field: str, operator: str):
        self.field = field
        self.operator = operator
        super().__init__(
            f"Unsupported operator `{operator}` used for field `{field}`."
        )


class MissingFilterValueError(BadRequestError):
    """Condition needs a value but none was provided."""

    field: str
    operator: str

    def __init__(self, field: str, operator: str):
        self.field = field
        self.operator = operator
        super().__init__(
            f"No filter value provided for field `{field}` "
            f"with operator `{operator}`."
        )


class UnresolvedFieldError(BadRequestError):
    """Field identifier is not part of the field catalog."""

    field: str

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field `{field}` is not defined in the catalog.")


class TransportFailureError(BaseError):
    status_code = 502


class LoadError(Exception):
    status_code = 500
