"""Abstract base class for DNS-01 challenge providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self


class DnsProvider(ABC):
    """Interface for providers that publish and remove ACME DNS-01 TXT records."""

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @abstractmethod
    def present(self, resolved_zone: str, resolved_fqdn: str, key: str) -> None:
        """Create the challenge TXT record.

        Args:
            resolved_zone: Zone FQDN, usually with trailing dot (e.g. "example.com.").
            resolved_fqdn: Challenge record FQDN (e.g. "_acme-challenge.example.com.").
            key: TXT record value (the ACME key authorization digest).
        """

    @abstractmethod
    def cleanup(self, resolved_zone: str, resolved_fqdn: str, key: str) -> None:
        """Remove the challenge TXT records whose value equals ``key``.

        Args:
            resolved_zone: Zone FQDN, usually with trailing dot (e.g. "example.com.").
            resolved_fqdn: Challenge record FQDN (e.g. "_acme-challenge.example.com.").
            key: Value of the records to delete. Records with other values are kept.
        """
