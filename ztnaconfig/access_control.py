"""Schemas of the device access control resource and data source."""

from __future__ import annotations

from .schema import Attribute, ResourceSchema, ValueType
from .validations import compose_or_validations, validate_cidr4, validate_id

_DESCRIPTION = """Device Access Control allows organizations to prevent clients from accessing unauthorized sites and services while they are connected to corporate resources. 
With this, organizations can block unfiltered/unmonitored client access when the users are connected to Proofpoint ZTNA.

When Device Access Control is enabled, outgoing traffic from the endpoint is allowed if it is either:
- Routed through Proofpoint ZTNA.
- Destined to an allowed service on the Internet.
Any other outgoing traffic is dropped.

~> **NOTE:** Proofpoint recommends the Device Access Control to be enabled only when a Web Security solution exists, and its IP ranges are allowed. Otherwise, users will fail to access the Internet when connected to Proofpoint ZTNA.
"""
_APPLY_TO_ORG = (
    "Indicates whether this Access Control setting applies to the whole org. "
    "Note: This attribute overrides `apply_to_entities`."
)
_APPLY_TO_ENTITIES = "Entities (users, groups or network elements) to be subjected to the Access Control."
_EXEMPT_ENTITIES = "Entities (users, groups or network elements) which are exempt from the Access Control."
_ALLOWED_ROUTES = "List of allowed IPv4 route CIDRs."

EXCLUDED_KEYS = ("id",)


def _entity_validator():
    return compose_or_validations(validate_id(True, "ne"), validate_id(False, "usr", "grp"))


def resource_schema() -> ResourceSchema:
    """Schema of the managed access control resource."""
    return ResourceSchema(
        description=_DESCRIPTION,
        attributes={
            "id": Attribute(ValueType.STRING, computed=True),
            "name": Attribute(ValueType.STRING, required=True),
            "description": Attribute(ValueType.STRING, optional=True),
            "enabled": Attribute(ValueType.BOOL, optional=True, default=True),
            "apply_to_org": Attribute(ValueType.BOOL, optional=True, description=_APPLY_TO_ORG),
            "apply_to_entities": Attribute(
                ValueType.LIST,
                optional=True,
                elem=ValueType.STRING,
                validator=_entity_validator(),
                description=_APPLY_TO_ENTITIES,
            ),
            "exempt_entities": Attribute(
                ValueType.LIST,
                optional=True,
                elem=ValueType.STRING,
                validator=_entity_validator(),
                description=_EXEMPT_ENTITIES,
            ),
            "allowed_routes": Attribute(
                ValueType.LIST,
                required=True,
                elem=ValueType.STRING,
                validator=validate_cidr4(),
                description=_ALLOWED_ROUTES,
            ),
        },
    )


def data_source_schema() -> ResourceSchema:
    """Schema of the access control data source, looked up by id."""
    return ResourceSchema(
        description=_DESCRIPTION,
        attributes={
            "id": Attribute(ValueType.STRING, required=True, validator=validate_id(False, "ac")),
            "name": Attribute(ValueType.STRING, computed=True),
            "description": Attribute(ValueType.STRING, computed=True),
            "enabled": Attribute(ValueType.BOOL, computed=True),
            "apply_to_org": Attribute(ValueType.BOOL, computed=True, description=_APPLY_TO_ORG),
            "apply_to_entities": Attribute(
                ValueType.LIST, computed=True, elem=ValueType.STRING, description=_APPLY_TO_ENTITIES
            ),
            "exempt_entities": Attribute(
                ValueType.LIST, computed=True, elem=ValueType.STRING, description=_EXEMPT_ENTITIES
            ),
            "allowed_routes": Attribute(
                ValueType.LIST, computed=True, elem=ValueType.STRING, description=_ALLOWED_ROUTES
            ),
        },
    )