"""
Business error wrapper around generated error codes.

AppError pairs an error code with an optional overridden message and an
optional payload, and renders the response body sent to API clients:

    {"code": 4000, "msg": "INVALID PARAMETER", "data": {"field": "user_id"}}
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class ErrorCodeLike(Protocol):
    """Interface every generated error-code enum implements."""

    def code(self) -> int: ...

    def message(self) -> str: ...

    def message_lang(self, lang: str) -> str: ...

    def status(self) -> int: ...


@dataclass
class ErrorResponse:
    """Standard error response body."""

    code: int
    msg: str
    data: Optional[Any] = None

    @classmethod
    def from_error_code(cls, error_code: ErrorCodeLike) -> "ErrorResponse":
        """Create a response from an error code using its default message."""
        return cls(code=error_code.code(), msg=error_code.message())

    def with_msg(self, msg: str) -> "ErrorResponse":
        self.msg = msg
        return self

    def with_data(self, data: Any) -> "ErrorResponse":
        self.data = data
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict, omitting data when unset."""
        body = {"code": self.code, "msg": self.msg}
        if self.data is not None:
            body["data"] = self.data
        return body

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


class AppError(Exception):
    """
    Base class for business errors.

    Usage:
        error = AppError(ErrorCode.InvalidParam).with_msg("user_id is required")
        error.code   # 4000
        str(error)   # "[4000] user_id is required"
    """

    def __init__(
        self,
        error_code: ErrorCodeLike,
        msg: Optional[str] = None,
        data: Optional[Any] = None,
    ):
        self._error_code = error_code
        self._custom_msg = msg
        self._data = data
        super().__init__(str(self))

    @classmethod
    def with_code_and_data(cls, error_code: ErrorCodeLike, data: Any) -> "AppError":
        """Create an error carrying a payload."""
        return cls(error_code, data=data)

    def with_msg(self, msg: str) -> "AppError":
        """Override the default message."""
        self._custom_msg = msg
        self.args = (str(self),)
        return self

    def with_data(self, data: Any) -> "AppError":
        """Attach a payload describing the error context."""
        self._data = data
        return self

    @property
    def error_code(self) -> ErrorCodeLike:
        return self._error_code

    @property
    def code(self) -> int:
        return self._error_code.code()

    @property
    def msg(self) -> str:
        """Overridden message, or the error code's default message."""
        if self._custom_msg is not None:
            return self._custom_msg
        return self._error_code.message()

    @property
    def data(self) -> Optional[Any]:
        return self._data

    def to_response(self) -> ErrorResponse:
        """Convert to the response body."""
        response = ErrorResponse.from_error_code(self._error_code)
        if self._custom_msg is not None:
            response = response.with_msg(self._custom_msg)
        if self._data is not None:
            response = response.with_data(self._data)
        return response

    def to_http(self) -> Tuple[int, Dict[str, Any]]:
        """Return the (status, body) pair for an HTTP response."""
        return int(self._error_code.status()), self.to_response().to_dict()

    def __str__(self) -> str:
        return f"[{self.code}] {self.msg}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._error_code!r}, msg={self._custom_msg!r}, "
            f"data={self._data!r})"
        )
