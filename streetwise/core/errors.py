"""
Error taxonomy for the valuation engine.

    StreetwiseError
    ├── ProviderUnavailable   (geocoder transport/status/payload failure)
    └── CallerDataError       (bad input; fatal to that request, never retried)
        ├── InvalidAddress
        ├── InvalidWeights
        ├── EmptyCategorySet
        ├── InvalidPrice
        ├── InvalidConfidence
        └── InvalidCategory

An unresolved address is not an error: the normalizer returns None.
ProviderUnavailable never escapes the normalizer; it is logged and collapsed
to None there.
"""


class StreetwiseError(Exception):
    """Base exception for the engine."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class ProviderUnavailable(StreetwiseError):
    """The coordinate-lookup provider could not be reached or answered garbage."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class CallerDataError(StreetwiseError):
    """Input supplied by the caller violates the engine's contract."""


class InvalidAddress(CallerDataError):
    pass


class InvalidWeights(CallerDataError):
    def __init__(self, total: float, tolerance: float):
        self.total = total
        self.tolerance = tolerance
        super().__init__(
            f"Category weights sum to {total:g}; expected 100 ± {tolerance:g}"
        )


class EmptyCategorySet(CallerDataError):
    def __init__(self):
        super().__init__("At least one category score is required")


class InvalidPrice(CallerDataError):
    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a finite number greater than zero (got {value!r})")


class InvalidConfidence(CallerDataError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"confidence must be a number, got {value!r}")


class InvalidCategory(CallerDataError):
    """A category payload failed schema validation (range, type, missing field)."""

    def __init__(self, name, errors: list):
        self.name = name
        self.errors = errors
        fields = ", ".join(".".join(str(p) for p in e.get("loc", ())) for e in errors) or "?"
        super().__init__(f"Category {name!r} is invalid: {fields}")
