"""AliDNS API client — the four DNS actions the challenge provider needs, via the Alibaba Cloud SDK."""

from __future__ import annotations

import logging
from collections.abc import Callable

from alibabacloud_alidns20150109 import models as alidns_models
from alibabacloud_alidns20150109.client import Client as SdkClient
from alibabacloud_tea_openapi import models as open_api_models
from Tea.exceptions import TeaException

from alidns_acme.errors import ConfigError, ProviderCommunicationError
from alidns_acme.models import Record, ZonePage

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "alidns.aliyuncs.com"
_DEFAULT_TIMEOUT = 30
_MAX_RECORD_PAGE_SIZE = 500


def _request_id(exc: TeaException) -> str | None:
    data = exc.data if isinstance(exc.data, dict) else {}
    return data.get("RequestId")


class AliDnsClient:
    """Thin wrapper over the AliDNS SDK client exposing plain models and package errors."""

    def __init__(
        self,
        access_key_id: str,
        access_key_secret: str,
        region_id: str,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = _DEFAULT_TIMEOUT,
        _sdk_client: SdkClient | None = None,
    ) -> None:
        if _sdk_client is not None:
            self._client = _sdk_client
            return
        timeout_ms = int(timeout * 1000)
        config = open_api_models.Config(
            access_key_id=access_key_id,
            access_key_secret=access_key_secret,
            region_id=region_id,
            endpoint=endpoint,
            connect_timeout=timeout_ms,
            read_timeout=timeout_ms,
        )
        try:
            self._client = SdkClient(config)
        except TeaException as exc:
            raise ConfigError(f"alicloud: cannot create AliDNS client: {exc.message or exc}") from exc

    def _call(self, action: str, method: Callable, request) -> dict:
        """Invoke an SDK action and return the response body as an API-style dict."""
        logger.debug("Calling AliDNS %s", action)
        try:
            response = method(request)
        except TeaException as exc:
            raise ProviderCommunicationError(
                f"AliDNS {action} failed: {exc.code}: {exc.message}",
                code=exc.code,
                request_id=_request_id(exc),
            ) from exc
        except Exception as exc:
            # Transport failures surface as requests or Tea retry errors.
            raise ProviderCommunicationError(f"AliDNS {action} request failed: {exc}") from exc
        body = response.body.to_map() if response.body is not None else None
        return body if isinstance(body, dict) else {}

    def _unexpected(self, action: str, body: dict, exc: Exception) -> ProviderCommunicationError:
        return ProviderCommunicationError(
            f"AliDNS {action} returned an unexpected body: {exc!r}",
            request_id=body.get("RequestId"),
        )

    def list_zones(self, page_number: int, page_size: int = 100) -> ZonePage:
        """Fetch one page of the account's domains (``DescribeDomains``)."""
        request = alidns_models.DescribeDomainsRequest(page_number=page_number, page_size=page_size)
        body = self._call("DescribeDomains", self._client.describe_domains, request)
        try:
            return ZonePage.from_dict(body)
        except (KeyError, TypeError, ValueError) as exc:
            raise self._unexpected("DescribeDomains", body, exc) from exc

    def list_records(self, domain_name: str, page_size: int = _MAX_RECORD_PAGE_SIZE) -> list[Record]:
        """Fetch the first page of records in a domain (``DescribeDomainRecords``)."""
        request = alidns_models.DescribeDomainRecordsRequest(domain_name=domain_name, page_size=page_size)
        body = self._call("DescribeDomainRecords", self._client.describe_domain_records, request)
        try:
            return [Record.from_dict(r) for r in body.get("DomainRecords", {}).get("Record", [])]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise self._unexpected("DescribeDomainRecords", body, exc) from exc

    def add_record(self, domain_name: str, rr: str, type_: str, value: str) -> str:
        """Create a record (``AddDomainRecord``) and return its record ID."""
        request = alidns_models.AddDomainRecordRequest(domain_name=domain_name, rr=rr, type=type_, value=value)
        body = self._call("AddDomainRecord", self._client.add_domain_record, request)
        if not body.get("RecordId"):
            raise self._unexpected("AddDomainRecord", body, KeyError("RecordId"))
        return str(body["RecordId"])

    def delete_record(self, record_id: str) -> None:
        """Delete a record by ID (``DeleteDomainRecord``)."""
        request = alidns_models.DeleteDomainRecordRequest(record_id=record_id)
        self._call("DeleteDomainRecord", self._client.delete_domain_record, request)

    def close(self) -> None:
        """The SDK keeps no connection open between calls."""
