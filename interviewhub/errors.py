# interviewhub/errors.py
# Domain error kinds. Each one is an HTTPException so services can raise it
# directly, the same way they raised plain HTTPException before.
from fastapi import HTTPException


class Unauthorized(HTTPException):
    """No identity (401), or an identity without the required role/ownership (403)."""

    def __init__(self, detail: str = "Valid access token required", *, forbidden: bool = False):
        if forbidden:
            super().__init__(
                status_code=403,
                detail={"message": "forbidden", "detail": detail},
            )
        else:
            super().__init__(
                status_code=401,
                detail={"message": "unauthorized", "detail": detail},
                headers={"WWW-Authenticate": "Bearer"},
            )

    @classmethod
    def forbidden(cls, detail: str = "Not authorized") -> "Unauthorized":
        return cls(detail, forbidden=True)


class NotFound(HTTPException):
    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            status_code=404,
            detail={"message": message, "detail": detail or message.replace("_", " ")},
        )


class PolicyViolation(HTTPException):
    def __init__(self, message: str, detail: str):
        super().__init__(
            status_code=409,
            detail={"message": message, "detail": detail},
        )


class OutOfRange(HTTPException):
    def __init__(self, message: str, detail: str):
        super().__init__(
            status_code=400,
            detail={"message": message, "detail": detail},
        )
