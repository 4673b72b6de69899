"""Exception hierarchy for Polyaffine."""


class PolyaffineError(Exception):
    """Base exception for all Polyaffine errors."""

    pass


class ValidationError(PolyaffineError, ValueError):
    """Invalid input to a geometric operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PolygonSizeError(ValidationError):
    """Polygon constructed with too few vertices."""

    def __init__(self, count: int, minimum: int = 3) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"Polygon needs at least {minimum} points, got {count}")


class UnknownAxisError(ValidationError):
    """Reflection requested across an axis outside the supported set."""

    def __init__(self, axis: object) -> None:
        self.axis = axis
        super().__init__(f"unknown axis: {axis!r}")


class DomainError(PolyaffineError, ArithmeticError):
    """Operation undefined for the given numeric input."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SingularMatrixError(DomainError):
    """Matrix has a zero determinant and cannot be inverted."""

    def __init__(self, determinant: float) -> None:
        self.determinant = determinant
        super().__init__("singular matrix")


class RenderError(PolyaffineError):
    """Errors raised by presentation adapters."""

    pass


class BackendUnavailableError(RenderError):
    """Optional rendering backend is not installed."""

    def __init__(self, backend: str, hint: str) -> None:
        self.backend = backend
        self.hint = hint
        super().__init__(f"{backend} is not available. {hint}")


class OutputWriteError(RenderError):
    """Error writing an exported document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
