# ztnaconfig

Attribute schemas, value validators and a small users API client for
zero-trust network access configuration. Schemas are provided for access
controls, alerts, certificates, egress routes and enterprise DNS.

## Installation

```
pip install ztnaconfig
```

## Validators

`ztnaconfig.validations` holds validator factories. Each factory returns a
callable that takes a value, returns it unchanged when it is acceptable and
raises `ValidationError` (a `ValueError`) otherwise. The exception's
`messages` attribute lists every reason.

```python
from ztnaconfig.validations import (
    ValidationError,
    compose_or_validations,
    validate_hostname,
    validate_id,
)

check = compose_or_validations(validate_id(True, "ne"), validate_id(False, "usr", "grp"))
check("ne-123")    # returns "ne-123"
check("usr-abc")   # returns "usr-abc"

try:
    validate_hostname()("test-.com")
except ValidationError as exc:
    print(exc.messages)
```

The factories are:

- `validate_string_enum(*values)`, `validate_int_enum(*values)`: one of the given values.
- `validate_id(numeric, *prefixes)`: identifiers of the form `<prefix>-<unique>`, with a numeric or alphanumeric suffix of up to 30 characters.
- `validate_pattern(pattern)`: strings in which the regular expression is found.
- `validate_hostname()`, `validate_wildcard_hostname()`: host names, the latter also allowing a leading `*.`.
- `validate_int_range(min_value, max_value)`: integers within an inclusive range.
- `validate_string_to_int_range(min_value, max_value)`: an empty string, or an integer written as a string within the range.
- `validate_hostname_or_ipv4()`: a host name or an IP address.
- `validate_email()`: e-mail addresses of at most 254 characters.
- `validate_url()`: absolute URLs or absolute paths as used in requests.
- `validate_http_net_location()`: `http`/`https` URLs with no path or query.
- `validate_json()`: any JSON document.
- `compose_or_validations(*validators)`: accepts a value if any one validator does.
- `validate_dns()`: dotted domain names without underscores.
- `validate_domain_name()`: an empty string or a host name.
- `validate_cidr4()`: IPv4 CIDRs whose address is the network address.
- `validate_pem_cert()`: a PEM `CERTIFICATE` block holding a DER public key.

The module also exposes the compiled patterns `TAG_PATTERN`,
`PRIVILEGES_PATTERN` and `HTTP_HEADER_PATTERN`.

## Schemas

`ztnaconfig.schema` defines `ValueType`, `Attribute`, `ResourceSchema` and
`SchemaError`. The modules `access_control`, `alert`, `certificate`,
`egress_route` and `enterprise_dns` each provide `resource_schema()` for the
managed resource and `data_source_schema()` for the lookup by id.

```python
from ztnaconfig import enterprise_dns
from ztnaconfig.schema import SchemaError

schema = enterprise_dns.resource_schema()
config = {
    "name": "ed-name",
    "description": "ed-description",
    "mapped_domains": [
        {"name": "step1.test1.com", "mapped_domain": "step1.test1.com"},
    ],
}
schema.validate(config)           # returns config
full = schema.with_defaults(config)
```

`ResourceSchema.validate` raises `SchemaError`, whose `errors` attribute
lists every problem: unknown or missing required attributes, values set on
computed attributes, conflicting attributes, wrong value types, too few or
too many items, and values rejected by an attribute's validator.
`with_defaults` returns a copy with attribute defaults filled in, also
inside nested blocks.

`alert.conditions_to_state(alert)` turns the `spike_condition` and
`threshold_condition` of an alert object into single-block lists, leaving
out any condition that is absent.

## Users API

`ztnaconfig.user` provides the `User` dataclass, `new_user(values, changed)`
and `UsersApi`. `UsersApi` works over any object that satisfies the
`Transport` protocol: its `request(method, url, params=None, body=None)`
sends one HTTP request and returns the raw response body as bytes or text,
raising on failures.

```python
from ztnaconfig.user import UsersApi, new_user

api = UsersApi(transport, "https://api.example.com")
user = new_user(
    {"given_name": "Ada", "email": "ada@example.com", "enabled": True},
    changed={"given_name", "email"},
)
created = api.create(user)
found = api.get_by_email("ada@example.com")   # None when no user matches exactly
roles = api.assign_roles(created.id, ["rol-abc"])
```

`UsersApi` also has `update`, `get_by_id` and `delete`. Responses that are
not valid JSON raise `ValueError`.

## What the package does not do

- It ships no HTTP transport; you supply one.
- Users are the only objects with API calls. The other modules describe and
  check configurations but do not create, read, update or delete anything.
- There is no command-line tool and no storage of state.

## Running the tests

```
pip install -e ".[test]"
pytest
```