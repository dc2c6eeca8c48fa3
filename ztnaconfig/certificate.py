"""Schemas of the SSL certificate resource and data source."""

from __future__ import annotations

from .schema import Attribute, ResourceSchema, ValueType
from .validations import validate_dns, validate_id

_DESCRIPTION = (
    "SSL certificate. It is used mostly to allow EasyLinks to utilize HTTPS, "
    "when operating with the `redirect` or `native` access types."
)
_SANS = "List of certificate SANs"
_STATUS = (
    "Certificate state, can be one of the following:\n"
    "\t- **Pending** - Initial state that may take several minutes. During this stage, "
    "a request is sent to certification authority and the system is waiting for the "
    "certificate approval.\n"
    "\t- **OK** - Certificate has been validated by the certification authority and "
    "ready for use.\n"
    "\t- **Warning** - Certificate is valid, but it is to expire within 30 days. DNS check "
    "attempts for the certificate renewal have failed.\n"
    "\t- **Error** - Certificate has expired, all DNS checks have failed so far, and no "
    "renewal attempts are being made.\n"
)

EXCLUDED_KEYS = ("id",)

_COMPUTED_STRINGS = (
    "serial_number",
    "status_description",
    "valid_not_after",
    "valid_not_before",
)


def _computed_attributes() -> dict[str, Attribute]:
    attributes = {name: Attribute(ValueType.STRING, computed=True) for name in _COMPUTED_STRINGS}
    attributes["status"] = Attribute(ValueType.STRING, computed=True, description=_STATUS)
    return attributes


def resource_schema() -> ResourceSchema:
    """Schema of the managed certificate resource."""
    attributes = {
        "id": Attribute(ValueType.STRING, computed=True),
        "name": Attribute(ValueType.STRING, required=True),
        "description": Attribute(ValueType.STRING, optional=True),
        "sans": Attribute(
            ValueType.SET,
            required=True,
            elem=ValueType.STRING,
            validator=validate_dns(),
            force_new=True,
            min_items=1,
            description=_SANS,
        ),
    }
    attributes.update(_computed_attributes())
    return ResourceSchema(description=_DESCRIPTION, attributes=attributes)


def data_source_schema() -> ResourceSchema:
    """Schema of the certificate data source, looked up by id."""
    attributes = {
        "id": Attribute(ValueType.STRING, required=True, validator=validate_id(False, "crt")),
        "name": Attribute(ValueType.STRING, computed=True),
        "description": Attribute(ValueType.STRING, computed=True),
        "sans": Attribute(
            ValueType.SET, computed=True, elem=ValueType.STRING, description=_SANS
        ),
    }
    attributes.update(_computed_attributes())
    return ResourceSchema(description=_DESCRIPTION, attributes=attributes)