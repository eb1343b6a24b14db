"""Domain errors raised by the services and translated to HTTP responses by the routes."""


class InvalidInput(ValueError):
    """Malformed or missing fields, broken invariants or unresolved references."""

    def __init__(self, message: str = "Invalid input", errors: list[dict] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class NotFound(ValueError):
    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message


class SeatsUnavailable(ValueError):
    def __init__(self, message: str = "No seats available"):
        super().__init__(message)
        self.message = message


def format_validation_errors(errors) -> list[dict]:
    """Flatten pydantic error dicts to [{"field": "a.b", "message": "..."}]."""
    out = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        out.append({"field": ".".join(loc), "message": err.get("msg", "invalid value")})
    return out
