from typing import Any, Dict, Optional


class RosterError(Exception):
    """
    Base class for roster errors.
    Carries a stable code and optional details alongside the message.
    """
    def __init__(
        self,
        message: str,
        code: str = "ROSTER_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)


class RosterPersistError(RosterError):
    """Raised when the roster file cannot be written. Not recoverable."""
    def __init__(self, path: str, cause: Exception):
        super().__init__(
            message=f"Could not save students to {path}: {cause}",
            code="PERSIST_ERROR",
            details={"path": path, "cause": str(cause)}
        )
        self.path = path
        self.cause = cause
