"""Error types raised by the AliDNS challenge provider."""

from __future__ import annotations


class AliDnsError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(AliDnsError, ValueError):
    """Credentials, region or other settings are missing or malformed."""


class ZoneNotFoundError(AliDnsError):
    """No zone in the account matches the requested domain."""

    def __init__(self, zone: str) -> None:
        super().__init__(f"alicloud: zone {zone} not found in AliDNS")
        self.zone = zone


class ProviderCommunicationError(AliDnsError):
    """A call to the AliDNS API failed.

    ``code`` and ``request_id`` are filled from the API error body when the
    service returned one. The transport or HTTP error is chained as ``__cause__``.
    """

    def __init__(self, message: str, code: str | None = None, request_id: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.request_id = request_id


class RecordCreateError(ProviderCommunicationError):
    """Adding the challenge TXT record failed."""


class RecordDeleteError(ProviderCommunicationError):
    """Deleting a challenge TXT record failed."""


class RecordLookupError(ProviderCommunicationError):
    """Listing the zone's records failed."""


def wrap(
    error_cls: type[ProviderCommunicationError], message: str, exc: ProviderCommunicationError
) -> ProviderCommunicationError:
    """Build an operation-specific error from a lower-level API failure."""
    return error_cls(f"{message}: {exc}", code=exc.code, request_id=exc.request_id)
