# The module defines the error taxonomy shared by the upstream client, the service adapters and the tools.
# Date: 2026-10-17
# Version: 0.1.0

from typing import Optional


class UltimarrError(Exception):
    """Base class for every error raised inside ultimarr."""


class ConfigurationError(UltimarrError):
    """
    Raised at startup when the environment does not describe a usable configuration.
    Attributes:
        problems (list[str]): One entry per missing or invalid setting.
    """
    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid configuration: " + "; ".join(problems))


class InvalidArgument(UltimarrError):
    """
    Raised when a tool call's arguments fail the tool's input schema.
    Attributes:
        argument (str): The name of the offending argument.
        expected (str): The expected JSON type of the argument.
        reason (str): What was wrong with the supplied value.
    """
    def __init__(self, argument: str, expected: str, reason: str):
        self.argument = argument
        self.expected = expected
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason} (expected {expected})")


class TransportError(UltimarrError):
    """Raised when an upstream service cannot be reached (DNS, connect, timeout)."""
    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        # httpx timeouts often carry an empty message
        detail = str(cause) or type(cause).__name__
        super().__init__(f"Request to {url} failed: {detail}")


class UpstreamHTTPError(UltimarrError):
    """
    Raised when an upstream service answers with a status code >= 400.
    Attributes:
        status_code (int): The HTTP status returned by the upstream service.
        body_prefix (str): At most the first 200 bytes of the response body.
    """
    def __init__(self, status_code: int, body_prefix: str):
        self.status_code = status_code
        self.body_prefix = body_prefix
        super().__init__(f"HTTP {status_code}: {body_prefix}")


class MalformedUpstreamResponse(UltimarrError):
    """Raised when an upstream body is not JSON or lacks a required field."""
    def __init__(self, detail: str, endpoint: Optional[str] = None):
        self.detail = detail
        self.endpoint = endpoint
        where = f" from {endpoint}" if endpoint else ""
        super().__init__(f"Malformed upstream response{where}: {detail}")
