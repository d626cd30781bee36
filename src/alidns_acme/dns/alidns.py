"""AliDNS provider — create/delete ACME challenge TXT records via the AliDNS API."""

from __future__ import annotations

import logging
import re

from alidns_acme.dns.base import DnsProvider
from alidns_acme.dns.client import DEFAULT_ENDPOINT, AliDnsClient
from alidns_acme.dns.util import extract_record_name, unfqdn
from alidns_acme.errors import (
    ConfigError,
    ProviderCommunicationError,
    RecordCreateError,
    RecordDeleteError,
    RecordLookupError,
    ZoneNotFoundError,
    wrap,
)
from alidns_acme.models import Record, Zone

logger = logging.getLogger(__name__)

_REGION_RE = re.compile(r"^[a-z]{2,}(-[a-z0-9]+)+$")
_RECORD_PAGE_SIZE = 500


class AliDnsProvider(DnsProvider):
    """DNS provider backed by Alibaba Cloud DNS."""

    def __init__(
        self,
        region_id: str,
        access_key_id: str,
        access_key_secret: str,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 30,
        _api_client: AliDnsClient | None = None,
    ) -> None:
        if not region_id or not _REGION_RE.match(region_id):
            raise ConfigError(f"alicloud: invalid region id {region_id!r}")
        if not access_key_id or not access_key_secret:
            raise ConfigError("alicloud: access key id and secret are required")
        self._api = _api_client or AliDnsClient(
            access_key_id,
            access_key_secret,
            region_id,
            endpoint=endpoint,
            timeout=timeout,
        )

    def _get_hosted_zone(self, resolved_zone: str) -> tuple[str, str]:
        """Find the account zone for ``resolved_zone``. Returns (zone_id, zone_name).

        Every page of ``DescribeDomains`` is read until the reported total is
        covered. When the listing holds duplicates the last match wins.
        """
        zones: list[Zone] = []
        page_number = 1
        while True:
            try:
                page = self._api.list_zones(page_number)
            except ProviderCommunicationError as exc:
                raise wrap(ProviderCommunicationError, "alicloud: error describing domains", exc) from exc
            logger.debug(
                "Fetched domain page %d (%d of %d)", page.page_number, len(page.zones), page.total_count
            )
            zones.extend(page.zones)
            if page.is_last:
                break
            page_number += 1

        wanted = unfqdn(resolved_zone)
        hosted_zone: Zone | None = None
        for zone in zones:
            if zone.domain_name == wanted:
                hosted_zone = zone

        if hosted_zone is None:
            raise ZoneNotFoundError(resolved_zone)
        return hosted_zone.domain_id, hosted_zone.domain_name

    def _find_txt_records(self, resolved_zone: str, resolved_fqdn: str) -> list[Record]:
        """List the zone's records whose relative name matches the challenge FQDN."""
        _zone_id, zone_name = self._get_hosted_zone(resolved_zone)
        # Single page only; records past the first 500 are not seen.
        records = self._api.list_records(zone_name, page_size=_RECORD_PAGE_SIZE)
        record_name = extract_record_name(resolved_fqdn, zone_name)
        return [r for r in records if r.rr == record_name]

    def present(self, resolved_zone: str, resolved_fqdn: str, key: str) -> None:
        try:
            _zone_id, zone_name = self._get_hosted_zone(resolved_zone)
        except ProviderCommunicationError as exc:
            raise wrap(ProviderCommunicationError, "alicloud: error getting hosted zones", exc) from exc
        record_name = extract_record_name(resolved_fqdn, zone_name)
        try:
            record_id = self._api.add_record(zone_name, record_name, "TXT", key)
        except ProviderCommunicationError as exc:
            raise wrap(RecordCreateError, "alicloud: error adding domain record", exc) from exc
        logger.info("Created TXT record %s in AliDNS zone %s (id %s)", record_name, zone_name, record_id)

    def cleanup(self, resolved_zone: str, resolved_fqdn: str, key: str) -> None:
        try:
            records = self._find_txt_records(resolved_zone, resolved_fqdn)
        except ProviderCommunicationError as exc:
            raise wrap(RecordLookupError, "alicloud: error finding txt records", exc) from exc

        # Zone may have been removed since the lookup.
        self._get_hosted_zone(resolved_zone)

        deleted = 0
        for record in records:
            if record.value != key:
                continue
            try:
                self._api.delete_record(record.record_id)
            except ProviderCommunicationError as exc:
                raise wrap(RecordDeleteError, "alicloud: error deleting domain record", exc) from exc
            deleted += 1
            logger.info(
                "Deleted TXT record %s from AliDNS zone %s (id %s)",
                record.rr,
                record.domain_name,
                record.record_id,
            )

        if deleted == 0:
            logger.warning("No matching TXT record for %s in AliDNS, skipping delete", resolved_fqdn)

    def close(self) -> None:
        """Close the underlying API client."""
        self._api.close()
