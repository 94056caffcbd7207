from __future__ import annotations

import enum
from dataclasses import dataclass


class ErrorKind(enum.IntEnum):
    """Pipeline stage that produced a failure."""

    TRANSPORT = 1
    PARSE = 2
    DECODE = 3

    @property
    def domain(self) -> str:
        return f"decoders.{self.name.lower()}"


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    """
    Failure payload carried by every `Error(...)` in the pipeline.

    `domain` and `code` identify the stage; `message` is for humans.
    `status` is set only for transport failures caused by an HTTP status.
    """

    domain: str
    code: int
    message: str | None = None
    status: int | None = None

    @property
    def kind(self) -> ErrorKind | None:
        """Pipeline stage for the three built-in codes, None for any other code."""
        try:
            return ErrorKind(self.code)
        except ValueError:
            return None

    def __str__(self) -> str:
        text = f"{self.domain}[{self.code}]"
        return f"{text}: {self.message}" if self.message else text


def transport_error(message: str, *, status: int | None = None) -> ErrorInfo:
    """Non-2xx status or transport-level failure."""
    return ErrorInfo(
        domain=ErrorKind.TRANSPORT.domain,
        code=int(ErrorKind.TRANSPORT),
        message=message,
        status=status,
    )


def parse_error(message: str) -> ErrorInfo:
    """Bytes are not valid JSON."""
    return ErrorInfo(domain=ErrorKind.PARSE.domain, code=int(ErrorKind.PARSE), message=message)


def decode_error(target: type | str) -> ErrorInfo:
    """Well-formed JSON that does not fit the shape of `target`."""
    name = target if isinstance(target, str) else target.__name__
    return ErrorInfo(
        domain=ErrorKind.DECODE.domain,
        code=int(ErrorKind.DECODE),
        message=f"cannot decode {name}",
    )


__all__ = (
    "ErrorInfo",
    "ErrorKind",
    "decode_error",
    "parse_error",
    "transport_error",
)
