# -*- coding: utf-8 -*-
# xconnect/core/kernel/errors.py
# Typed failures shared by every exchange binding.

from typing import Optional


class ExError(Exception):
    """Base class for all connectivity-layer errors."""


class TransportError(ExError):
    """Network-level failure (DNS, refused connection, timeout). Never retried here."""

    def __init__(self, message, reason: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.reason = reason


class ApiError(ExError):
    """The venue answered with a status other than 200."""

    def __init__(self, status_code: int, body: str = "", message: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.message = message or f"response status {status_code}"
        super().__init__(self.message)

    def __str__(self):
        if self.body:
            return f"{self.message}: {self.body[:200]}"
        return self.message


class DecodeError(ExError):
    """Response body does not match the expected wire shape."""

    def __init__(self, message, body=None):
        super().__init__(message)
        self.message = message
        self.body = summarize(body)

    def __str__(self):
        if self.body:
            return f"{self.message} (body={self.body!r})"
        return self.message


class ClockError(ExError):
    """Timestamp source unavailable; signed requests cannot be built."""


class NotFound(ExError):
    """Queried entity is absent from the response set."""


class Unsupported(ExError):
    """Capability is declared but not implemented by this venue binding."""


class ConfigError(ExError):
    """Missing or unusable configuration (files, sections, secrets)."""


def summarize(body, limit=200):
    if body is None:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    text = str(body)
    return text if len(text) <= limit else text[:limit] + "..."


__all__ = [
    "ExError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "ClockError",
    "NotFound",
    "Unsupported",
    "ConfigError",
    "summarize",
]
