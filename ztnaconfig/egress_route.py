"""Schemas of the egress route resource and data source."""

from __future__ import annotations

from .schema import Attribute, ResourceSchema, ValueType
from .validations import (
    compose_or_validations,
    validate_hostname,
    validate_id,
    validate_pattern,
)

_DESCRIPTION = """Egress routes allow traffic from a defined source (groups, users, devices or any other network element) to be routed to a specific MetaPort.
This can be useful for a variety of use cases including testing, security and compliance.
For example, you can define egress rules for SaaS applications that require access from a specific region for regulatory purposes.
You can set up egress rules to route traffic from a source to a MetaPort in your own data center or public cloud instance for service chaining or any type of traffic manipulation."""
_SOURCES = (
    "Entities (users, groups or network elements) to be affected by the egress route "
    "(cannot be a Mapped Subnet if `via` is also a Mapped Subnet)."
)
_EXEMPT_SOURCES = "Entities (users, groups or network elements) to be excluded from the egress route."
_DESTINATIONS = "Target hostnames or domains."
_VIA = (
    "Defines how the traffic will be routed:\n"
    "\t- **DIRECT**: Directs the traffic to egress from the same PoP it has entered. "
    "Use it to override other, less specific egress rules.\n"
    "\t- **Mapped Subnet ID**: Directs the traffic to egress via specified mapped subnet.\n"
    "\t- **Region**: Directs the traffic to egress from a specific region, see `location` data-source."
)

EXCLUDED_KEYS = ("id",)


def _source_validator():
    return validate_id(False, "usr", "grp", "ne", "mc")


def resource_schema() -> ResourceSchema:
    """Schema of the managed egress route resource."""
    return ResourceSchema(
        description=_DESCRIPTION,
        attributes={
            "id": Attribute(ValueType.STRING, computed=True),
            "name": Attribute(ValueType.STRING, required=True),
            "description": Attribute(ValueType.STRING, optional=True),
            "enabled": Attribute(ValueType.BOOL, optional=True, default=True),
            "destinations": Attribute(
                ValueType.LIST,
                optional=True,
                elem=ValueType.STRING,
                validator=compose_or_validations(validate_hostname(), validate_pattern(r"^\.$")),
                description=_DESTINATIONS,
            ),
            "exempt_sources": Attribute(
                ValueType.LIST,
                optional=True,
                elem=ValueType.STRING,
                validator=_source_validator(),
                description=_EXEMPT_SOURCES,
            ),
            "sources": Attribute(
                ValueType.LIST,
                optional=True,
                elem=ValueType.STRING,
                validator=_source_validator(),
                description=_SOURCES,
            ),
            "via": Attribute(ValueType.STRING, required=True, description=_VIA),
        },
    )


def data_source_schema() -> ResourceSchema:
    """Schema of the egress route data source, looked up by id."""
    return ResourceSchema(
        description=_DESCRIPTION,
        attributes={
            "id": Attribute(ValueType.STRING, required=True, validator=validate_id(False, "er")),
            "name": Attribute(ValueType.STRING, computed=True),
            "description": Attribute(ValueType.STRING, computed=True),
            "enabled": Attribute(ValueType.BOOL, computed=True),
            "destinations": Attribute(
                ValueType.LIST, computed=True, elem=ValueType.STRING, description=_DESTINATIONS
            ),
            "exempt_sources": Attribute(
                ValueType.LIST, computed=True, elem=ValueType.STRING, description=_EXEMPT_SOURCES
            ),
            "sources": Attribute(
                ValueType.LIST, computed=True, elem=ValueType.STRING, description=_SOURCES
            ),
            "via": Attribute(ValueType.STRING, computed=True, description=_VIA),
        },
    )