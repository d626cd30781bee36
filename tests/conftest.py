"""Shared test fixtures for alidns-acme."""

from unittest.mock import MagicMock

import pytest

from alidns_acme.dns.alidns import AliDnsProvider
from alidns_acme.dns.client import AliDnsClient
from alidns_acme.models import Record, Zone, ZonePage


def make_page(names, page_number=1, page_size=20, total_count=None) -> ZonePage:
    """Build a domain listing page with one zone per name (id = "id-<name>")."""
    zones = tuple(Zone(domain_id=f"id-{n}", domain_name=n) for n in names)
    return ZonePage(
        zones=zones,
        page_number=page_number,
        page_size=page_size,
        total_count=len(zones) if total_count is None else total_count,
    )


def make_record(record_id, rr="_acme-challenge", value="token", type_="TXT") -> Record:
    return Record(record_id=record_id, rr=rr, type=type_, value=value, domain_name="example.com")


@pytest.fixture
def api():
    mock_api = MagicMock(spec=AliDnsClient)
    mock_api.list_zones.return_value = make_page(["example.com"])
    mock_api.list_records.return_value = []
    return mock_api


@pytest.fixture
def provider(api):
    return AliDnsProvider(
        region_id="cn-hangzhou",
        access_key_id="ak-id",
        access_key_secret="ak-secret",
        _api_client=api,
    )
