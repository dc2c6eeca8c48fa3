"""Schemas of the enterprise DNS resource and data source."""

from __future__ import annotations

from .schema import Attribute, ResourceSchema, ValueType
from .validations import validate_hostname

_DESCRIPTION = (
    "Enterprise DNS provides integration with global, enterprise DNS servers, "
    "allowing resolution of FQDNs for domains that are in different locations/datacenters."
)
_MAPPED_DOMAINS = "DNS suffixes to be resolved within the enterprise DNS server"
_MAPPED_DOMAIN = "Proofpoint DNS Suffix"
_MD_NAME = "Enterprise DNS server DNS suffix"

EXCLUDED_KEYS = ("id",)


def resource_schema() -> ResourceSchema:
    """Schema of the managed enterprise DNS resource."""
    mapped_domain = ResourceSchema(
        attributes={
            "mapped_domain": Attribute(
                ValueType.STRING,
                required=True,
                validator=validate_hostname(),
                description=_MAPPED_DOMAIN,
            ),
            "name": Attribute(
                ValueType.STRING,
                required=True,
                validator=validate_hostname(),
                description=_MD_NAME,
            ),
        }
    )
    return ResourceSchema(
        description=_DESCRIPTION,
        attributes={
            "id": Attribute(ValueType.STRING, computed=True),
            "name": Attribute(ValueType.STRING, required=True),
            "description": Attribute(ValueType.STRING, optional=True),
            "mapped_domains": Attribute(
                ValueType.SET, required=True, elem=mapped_domain, description=_MAPPED_DOMAINS
            ),
        },
    )


def data_source_schema() -> ResourceSchema:
    """Schema of the enterprise DNS data source, looked up by id."""
    mapped_domain = ResourceSchema(
        attributes={
            "mapped_domain": Attribute(ValueType.STRING, computed=True, description=_MAPPED_DOMAIN),
            "name": Attribute(ValueType.STRING, computed=True, description=_MD_NAME),
        }
    )
    return ResourceSchema(
        description=_DESCRIPTION,
        attributes={
            "id": Attribute(ValueType.STRING, required=True),
            "name": Attribute(ValueType.STRING, computed=True),
            "description": Attribute(ValueType.STRING, computed=True),
            "mapped_domains": Attribute(
                ValueType.SET, computed=True, elem=mapped_domain, description=_MAPPED_DOMAINS
            ),
        },
    )