"""Tests for DnsProvider ABC."""

import pytest

from alidns_acme.dns.base import DnsProvider


class FakeProvider(DnsProvider):
    def __init__(self):
        self.closed = False

    def present(self, resolved_zone, resolved_fqdn, key):
        pass

    def cleanup(self, resolved_zone, resolved_fqdn, key):
        pass

    def close(self):
        self.closed = True


def test_cannot_instantiate_abc():
    with pytest.raises(TypeError, match="abstract"):
        DnsProvider()


def test_concrete_subclass_works():
    provider = FakeProvider()
    assert isinstance(provider, DnsProvider)


def test_context_manager_closes_provider():
    with FakeProvider() as provider:
        assert not provider.closed
    assert provider.closed


def test_context_manager_closes_on_error():
    provider = FakeProvider()
    with pytest.raises(RuntimeError):
        with provider:
            raise RuntimeError("boom")
    assert provider.closed
