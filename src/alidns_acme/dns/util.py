"""DNS name helpers."""

from __future__ import annotations


def unfqdn(name: str) -> str:
    """Strip the trailing root separator from a fully qualified name."""
    return name.removesuffix(".")


def extract_record_name(fqdn: str, domain: str) -> str:
    """Return the record name of ``fqdn`` relative to the zone ``domain``.

    The name is everything before the first occurrence of ``.<domain>``. When the
    zone does not appear in the FQDN at all, the whole normalized FQDN is used.

    Args:
        fqdn: Challenge record name (e.g. "_acme-challenge.example.com.").
        domain: Zone name without trailing dot (e.g. "example.com").

    Returns:
        The relative name (e.g. "_acme-challenge").
    """
    name = unfqdn(fqdn)
    idx = name.find(f".{domain}")
    if idx != -1:
        return name[:idx]
    return name
