import typing


class FixturistException(Exception):
    """
    Base exception class for all fixturist errors.

    Mirrors the shape of the ORM exceptions it sits next to: positional
    arguments are stringified and joined, and an optional `detail` carries a
    longer explanation.
    """

    def __init__(
        self,
        *args: typing.Any,
        detail: str = "",
    ):
        self.detail = detail
        super().__init__(*(str(arg) for arg in args if arg), self.detail)

    def __repr__(self) -> str:
        if self.detail:
            return f"{type(self).__name__} - {self.detail}"
        return type(self).__name__

    def __str__(self) -> str:
        return "".join(self.args).strip()


class InvalidPathError(FixturistException):
    """
    Raised when a blueprint directory does not exist or is not a directory.
    """


class UndefinedBlueprintError(FixturistException, LookupError):
    """
    Raised when no blueprint is registered for a model name and alias pair.

    Both parts of the key are kept on the exception so test failures point at
    the exact missing definition.
    """

    def __init__(self, model: str, alias: str, *, detail: str = "") -> None:
        self.model = model
        self.alias = alias
        super().__init__(
            f"Unable to locate blueprint with alias '{alias}' for model '{model}'.",
            detail=detail,
        )


class InvalidCountError(FixturistException, ValueError):
    """
    Raised when a batch operation receives a negative or non-integer count.
    """

    def __init__(self, count: typing.Any) -> None:
        self.count = count
        super().__init__(f"Count must be a non-negative integer, got {count!r}.")


class DeferredValueError(FixturistException):
    """
    Raised when a computed attribute fails while being resolved.

    The original exception is available as `cause` and is chained as
    `__cause__`.
    """

    def __init__(self, field: str, cause: BaseException) -> None:
        self.field = field
        self.cause = cause
        super().__init__(
            f"Computed value for '{field}' raised {type(cause).__name__}: {cause}"
        )


class PersistenceError(FixturistException):
    """
    Raised when the ORM rejects a write of a built instance.

    The builder neither retries nor rolls back; `instance` is the instance
    that failed and `cause` the underlying error.
    """

    def __init__(self, instance: typing.Any, cause: BaseException) -> None:
        self.instance = instance
        self.cause = cause
        super().__init__(
            f"Failed to persist {type(instance).__name__}: {type(cause).__name__}: {cause}"
        )


class AmbiguousModelError(FixturistException, LookupError):
    """
    Raised when a bare model name matches blueprints of several model classes.

    Classes from different modules may share a name; refer to them by class or
    by their full import path instead.
    """

    def __init__(self, name: str, candidates: typing.Sequence[str]) -> None:
        self.name = name
        self.candidates = list(candidates)
        super().__init__(
            f"Model name '{name}' is ambiguous, it matches: {', '.join(self.candidates)}."
        )
