"""Data classes parsed from AliDNS API responses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Zone:
    """A domain registered in the AliDNS account."""

    domain_id: str
    domain_name: str

    @classmethod
    def from_dict(cls, data: dict) -> Zone:
        return cls(
            domain_id=str(data["DomainId"]),
            domain_name=data["DomainName"],
        )


@dataclass(frozen=True)
class ZonePage:
    """One page of a ``DescribeDomains`` listing."""

    zones: tuple[Zone, ...]
    page_number: int
    page_size: int
    total_count: int

    @property
    def is_last(self) -> bool:
        return self.page_number * self.page_size >= self.total_count

    @classmethod
    def from_dict(cls, data: dict) -> ZonePage:
        return cls(
            zones=tuple(Zone.from_dict(d) for d in data.get("Domains", {}).get("Domain", [])),
            page_number=int(data["PageNumber"]),
            page_size=int(data["PageSize"]),
            total_count=int(data["TotalCount"]),
        )


@dataclass(frozen=True)
class Record:
    """A resource record inside a zone. ``rr`` is the name relative to the zone."""

    record_id: str
    rr: str
    type: str
    value: str
    domain_name: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Record:
        return cls(
            record_id=str(data["RecordId"]),
            rr=data["RR"],
            type=data["Type"],
            value=data["Value"],
            domain_name=data.get("DomainName", ""),
        )
