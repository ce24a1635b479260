# creche/core/errors.py
from typing import Any, Dict, List, Optional, Sequence

from starlette import status


class CrecheError(Exception):
    """Base class for errors the API turns into a JSON response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message}


class Unauthenticated(CrecheError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(CrecheError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(CrecheError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(CrecheError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class ValidationFailed(CrecheError):
    """Field-level input errors, rendered as ``{"message": ..., "errors": [...]}``."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"

    def __init__(self, errors: List[Dict[str, Any]], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message)

    @classmethod
    def field(cls, path: str, message: str) -> "ValidationFailed":
        return cls([{"path": [path], "message": message}], message)

    @classmethod
    def from_pydantic(cls, errors: Sequence[Dict[str, Any]]) -> "ValidationFailed":
        out = []
        for e in errors:
            loc = list(e.get("loc") or ())
            # drop the "body"/"query" prefix FastAPI adds
            if loc and loc[0] in ("body", "query", "path"):
                loc = loc[1:]
            msg = str(e.get("msg") or "Invalid value")
            if msg.startswith("Value error, "):
                msg = msg[len("Value error, "):]
            out.append({"path": loc, "message": msg})
        return cls(out)

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message, "errors": self.errors}
