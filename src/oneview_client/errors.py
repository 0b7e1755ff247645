from __future__ import annotations

from typing import Any


class OneViewError(Exception):
    """Base class for client errors."""


class ConfigError(OneViewError):
    pass


class OneViewConnectionError(OneViewError):
    """The appliance could not be reached."""


class OneViewHTTPError(OneViewError):
    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        error_code: str | None = None,
        recommended_actions: list[str] | None = None,
        method: str = "",
        uri: str = "",
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.error_code = error_code
        self.recommended_actions = recommended_actions or []
        self.method = method
        self.uri = uri
        prefix = f"{method} {uri}: " if method else ""
        code = f" [{error_code}]" if error_code else ""
        super().__init__(f"{prefix}{status_code}{code} {message}".strip())

    @classmethod
    def from_body(cls, status_code: int, body: Any, *, method: str = "", uri: str = "") -> OneViewHTTPError:
        # appliance errors look like {"errorCode": ..., "message": ..., "recommendedActions": [...]}
        if isinstance(body, dict):
            return cls(
                status_code,
                str(body.get("message") or body.get("details") or ""),
                error_code=body.get("errorCode"),
                recommended_actions=list(body.get("recommendedActions") or []),
                method=method,
                uri=uri,
            )
        return cls(status_code, str(body or ""), method=method, uri=uri)


class AuthenticationError(OneViewHTTPError):
    pass


class TaskFailedError(OneViewError):
    def __init__(self, task_uri: str, state: str, messages: list[str]) -> None:
        self.task_uri = task_uri
        self.state = state
        self.messages = messages
        detail = "; ".join(messages) if messages else "no error details"
        super().__init__(f"Task {task_uri} ended in state {state}: {detail}")


class TaskTimeoutError(OneViewError):
    def __init__(self, task_uri: str, timeout: float) -> None:
        self.task_uri = task_uri
        self.timeout = timeout
        super().__init__(f"Task {task_uri} did not finish within {timeout:g}s")
