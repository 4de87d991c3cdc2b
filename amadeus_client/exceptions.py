"""Error hierarchy for the Amadeus client.

All request failures derive from ResponseError, NetworkError included, so
`except ResponseError` also catches network failures. Catch NetworkError
first when the two need different handling:
- NetworkError: the round trip never completed (no status, no body)
- ClientError, ServerError and subclasses: the API answered with an error
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .response import Response


class AmadeusError(Exception):
    """Base class for all errors raised by this package."""

    pass


class ConfigurationError(AmadeusError):
    """Raised when the client is configured with missing or invalid settings."""

    pass


class ResponseError(AmadeusError):
    """An error tied to a (possibly empty) API response."""

    code = "UnknownError"

    def __init__(self, response: Response):
        self.response = response
        super().__init__(self.description())

    @property
    def status_code(self) -> int | None:
        return self.response.status_code

    @property
    def errors(self) -> list[dict[str, Any]]:
        """The parsed error envelope, or an empty list."""
        result = self.response.result
        if not self.response.parsed or not isinstance(result, dict):
            return []
        errors = result.get("errors")
        return errors if isinstance(errors, list) else []

    def description(self) -> str:
        """Human readable summary: status code followed by one line per error."""
        lines: list[str] = []
        if self.status_code is not None:
            lines.append(f"[{self.status_code}]")

        if self.errors:
            for error in self.errors:
                if not isinstance(error, dict):
                    continue
                line = ""
                source = error.get("source")
                if isinstance(source, dict) and source.get("parameter"):
                    line += f"[{source['parameter']}] "
                detail = error.get("detail") or error.get("title")
                if detail:
                    line += str(detail)
                if line:
                    lines.append(line.strip())
        elif self.response.parsed and isinstance(self.response.result, dict):
            lines.append(str(self.response.result))
        elif self.response.body:
            lines.append(self.response.body)

        return "\n".join(lines) if lines else self.code


class NetworkError(ResponseError):
    """The connection could not be established or the request not written."""

    code = "NetworkError"


class ServerError(ResponseError):
    """The API returned a 5xx status."""

    code = "ServerError"


class ClientError(ResponseError):
    """The API rejected the request (4xx or an error envelope)."""

    code = "ClientError"


class NotFoundError(ClientError):
    """The API returned a 404."""

    code = "NotFoundError"


class AuthenticationError(ClientError):
    """The credentials or bearer token were rejected."""

    code = "AuthenticationError"
