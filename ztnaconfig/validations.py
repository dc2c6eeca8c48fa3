"""Validators for attribute values.

Each factory returns a callable that takes a value, returns it unchanged when
it is acceptable, and raises :class:`ValidationError` otherwise.
"""

from __future__ import annotations

import base64
import ipaddress
import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Pattern, Union

from cryptography.hazmat.primitives.serialization import load_der_public_key

Validator = Callable[[Any], Any]

TAG_PATTERN = re.compile(r"^[a-zA-Z0-9\-_]+$")
PRIVILEGES_PATTERN = re.compile(r"^[a-z_]+:(read|write)$")
HTTP_HEADER_PATTERN = re.compile(r"^([\w\-]+):(.*)$", re.ASCII | re.DOTALL)

_NUMERIC_SUFFIX = re.compile(r"[0-9]{1,30}")
_ALPHANUMERIC_SUFFIX = re.compile(r"[a-zA-Z0-9]{1,30}")
_HOSTNAME_LABEL = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_\-]{0,62}[A-Za-z0-9_]")
_QUOTED_NUMERIC_TLD = re.compile(r'"[0-9]+\Z')
_ATOM = r"[A-Za-z0-9!#$%&'*+\-/=?^_`{|}~]+"
_DOT_ATOM = rf"{_ATOM}(?:\.{_ATOM})*"
_QUOTED_LOCAL = r'"(?:[^"\\\r\n]|\\.)*"'
_ADDR_SPEC = re.compile(rf"(?:{_DOT_ATOM}|{_QUOTED_LOCAL})@(?:{_DOT_ATOM}|\[[^\[\]\\]*\])")
_ATOI = re.compile(r"[+-]?[0-9]+")
_SCHEME_CHARS = frozenset("0123456789+-.")


class ValidationError(ValueError):
    """Raised when a value is rejected by a validator."""

    def __init__(self, *messages: str) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


def _format_list(values: Iterable[Any]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def validate_string_enum(*args: str) -> Validator:
    """Accept only one of the given strings."""
    allowed = list(args)

    def check(value: str) -> str:
        if value not in allowed:
            raise ValidationError(f'"{value}" is not one of {_format_list(allowed)}')
        return value

    return check


def validate_int_enum(*args: int) -> Validator:
    """Accept only one of the given integers."""
    allowed = list(args)

    def check(value: int) -> int:
        if value not in allowed:
            raise ValidationError(f"{value} is not one of {_format_list(allowed)}")
        return value

    return check


def validate_id(numeric: bool, *args: str) -> Validator:
    """Accept identifiers of the form ``<prefix>-<unique>``."""
    prefixes = list(args)
    suffix_pattern = _NUMERIC_SUFFIX if numeric else _ALPHANUMERIC_SUFFIX
    kind = "numeric" if numeric else "alphabet"

    def check(value: str) -> str:
        parts = value.split("-")
        if len(parts) != 2:
            raise ValidationError(f'"{value}" should be of the form <prefix>-<unique>')
        prefix, unique = parts
        if prefix not in prefixes:
            raise ValidationError(f'"{value}" should have a prefix of {_format_list(prefixes)}')
        if not suffix_pattern.fullmatch(unique):
            raise ValidationError(f'"{value}" should have a {kind} suffix')
        return value

    return check


def validate_pattern(pattern: Union[str, Pattern[str]]) -> Validator:
    """Accept strings in which the pattern is found."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def check(value: str) -> str:
        if not compiled.search(value):
            raise ValidationError(f'"{value}" does not match pattern "{compiled.pattern}"')
        return value

    return check


def _check_hostname(value: str) -> str:
    if not value or len(value.encode()) > 255 or value.endswith("."):
        raise ValidationError(f'"{value}" is not a valid hostname')
    labels = value.split(".")
    if _QUOTED_NUMERIC_TLD.search(labels[-1]):
        raise ValidationError(f'"{value}" is not a valid hostname - the TLD must not be all-numeric')
    if not all(_HOSTNAME_LABEL.fullmatch(label) for label in labels):
        raise ValidationError(f'"{value}" is not a valid hostname')
    return value


def validate_hostname() -> Validator:
    """Accept host names made of valid labels."""
    return _check_hostname


def validate_wildcard_hostname() -> Validator:
    """Accept host names, optionally prefixed with ``*.``."""

    def check(value: str) -> str:
        _check_hostname(value[2:] if value.startswith("*.") else value)
        return value

    return check


def _check_range(number: int, min_value: int, max_value: int) -> None:
    if number < min_value:
        raise ValidationError(f"{number} is lower than minimum value {min_value}")
    if number > max_value:
        raise ValidationError(f"{number} is higher than maximum value {max_value}")


def validate_int_range(min_value: int, max_value: int) -> Validator:
    """Accept integers within an inclusive range."""

    def check(value: int) -> int:
        _check_range(value, min_value, max_value)
        return value

    return check


def validate_string_to_int_range(min_value: int, max_value: int) -> Validator:
    """Accept an empty string, or an integer written as a string within a range."""

    def check(value: str) -> str:
        if value == "":
            return value
        if not _ATOI.fullmatch(value):
            raise ValidationError(f'parsing "{value}": invalid syntax')
        _check_range(int(value), min_value, max_value)
        return value

    return check


def _is_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return "%" not in value


def validate_hostname_or_ipv4() -> Validator:
    """Accept a host name or an IP address."""

    def check(value: str) -> str:
        try:
            _check_hostname(value)
        except ValidationError:
            if not _is_ip(value):
                raise ValidationError(f'"{value}" is not a valid hostname or ipv4') from None
        return value

    return check


def _parse_address(value: str) -> str:
    text = value.strip()
    if text.endswith(">") and "<" in text:
        text = text[text.rindex("<") + 1 : -1]
    if not _ADDR_SPEC.fullmatch(text):
        raise ValueError("invalid address")
    return text


def validate_email() -> Validator:
    """Accept e-mail addresses of at most 254 characters."""

    def check(value: str) -> str:
        if len(value) > 254:
            raise ValidationError(
                f'"{value}" is not a valid email - cannot be longer than 254 characters'
            )
        try:
            _parse_address(value)
        except ValueError:
            raise ValidationError(f'"{value}" is not a valid email') from None
        return value

    return check


@dataclass(frozen=True)
class _RequestURI:
    scheme: str = ""
    host: str = ""
    path: str = ""
    query: str = ""


def _split_scheme(raw: str) -> tuple[str, str]:
    for index, char in enumerate(raw):
        if char.isascii() and char.isalpha():
            continue
        if char in _SCHEME_CHARS:
            if index == 0:
                return "", raw
            continue
        if char == ":":
            if index == 0:
                raise ValueError("missing protocol scheme")
            return raw[:index].lower(), raw[index + 1 :]
        return "", raw
    return "", raw


def _check_port(port: str) -> None:
    if port and not (port.startswith(":") and port[1:].isdigit() and port[1:].isascii()):
        raise ValueError(f'invalid port "{port}" after host')


def _check_host(authority: str) -> str:
    host = authority.rsplit("@", 1)[-1]
    if host.startswith("["):
        end = host.find("]")
        if end < 0:
            raise ValueError("missing ']' in host")
        _check_port(host[end + 1 :])
    elif ":" in host:
        _check_port(host[host.rindex(":") :])
    return host


def _parse_request_uri(raw: str) -> _RequestURI:
    if raw == "":
        raise ValueError("empty url")
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in raw):
        raise ValueError("invalid control character in URL")
    if raw == "*":
        return _RequestURI(path="*")
    scheme, rest = _split_scheme(raw)
    rest, _, query = rest.partition("?")
    if not rest.startswith("/"):
        if scheme:
            return _RequestURI(scheme=scheme, query=query)
        raise ValueError("invalid URI for request")
    host = ""
    path = rest
    if scheme and rest.startswith("//"):
        authority, slash, remainder = rest[2:].partition("/")
        host = _check_host(authority)
        path = slash + remainder
    return _RequestURI(scheme=scheme, host=host, path=path, query=query)


def validate_url() -> Validator:
    """Accept absolute URLs and absolute paths as used in requests."""

    def check(value: str) -> str:
        try:
            _parse_request_uri(value)
        except ValueError as exc:
            raise ValidationError(f'"{value}" is not a valid url {exc}') from None
        return value

    return check


def validate_http_net_location() -> Validator:
    """Accept ``http``/``https`` URLs with no path or query."""

    def check(value: str) -> str:
        try:
            parsed = _parse_request_uri(value)
        except ValueError as exc:
            raise ValidationError(f'"{value}" is not a valid host: {exc}') from None
        if parsed.scheme not in ("http", "https"):
            raise ValidationError(
                f'"{value}" is not a valid host: should have http or https schema only, '
                f'got "{parsed.scheme}"'
            )
        if parsed.path:
            raise ValidationError(
                f'"{value}" is not a valid host: path is not allowed - got "{parsed.path}"'
            )
        if parsed.query:
            raise ValidationError(
                f'"{value}" is not a valid host: query params are not allowed - got "{parsed.query}"'
            )
        return value

    return check


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid character in literal {name}")


def validate_json() -> Validator:
    """Accept any JSON document."""

    def check(value: str) -> str:
        try:
            json.loads(value, parse_constant=_reject_constant)
        except ValueError as exc:
            raise ValidationError(f'"{value[:200]}" is not a valid json. {exc}') from None
        return value

    return check


def compose_or_validations(*args: Validator) -> Validator:
    """Accept a value if at least one of the validators accepts it."""
    validators = list(args)

    def check(value: Any) -> Any:
        messages: list[str] = []
        for validator in validators:
            try:
                validator(value)
            except ValidationError as exc:
                messages.extend(exc.messages)
            else:
                return value
        raise ValidationError(*messages)

    return check


def validate_dns() -> Validator:
    """Accept dotted domain names without underscores."""

    def check(value: str) -> str:
        if "_" in value or "." not in value:
            raise ValidationError(f'"{value}" is not a valid domain name')
        try:
            _check_hostname(value)
        except ValidationError:
            raise ValidationError(f'"{value}" is not a valid domain name') from None
        return value

    return check


def validate_domain_name() -> Validator:
    """Accept an empty string or a valid host name."""

    def check(value: str) -> str:
        if value == "":
            return value
        try:
            _check_hostname(value)
        except ValidationError:
            raise ValidationError(f'"{value}" is not a valid domain name') from None
        return value

    return check


def validate_cidr4() -> Validator:
    """Accept IPv4 CIDRs whose address is the network address."""

    def check(value: str) -> str:
        address, slash, prefix = value.partition("/")
        if not slash or not prefix.isascii() or not prefix.isdigit():
            raise ValidationError(f"invalid CIDR address: {value}")
        try:
            ip = ipaddress.ip_address(address)
            network = ipaddress.ip_network(value, strict=False)
        except ValueError:
            raise ValidationError(f"invalid CIDR address: {value}") from None
        if ip.version != 4 or ip != network.network_address:
            raise ValidationError(f'"{value}" is not a valid IPV4-CIDR')
        return value

    return check


_PEM_BLOCK = re.compile(
    r"-----BEGIN ([^\n]*?)-----[ \t]*\r?\n(.*?)-----END \1-----", re.DOTALL
)


def _decode_pem(text: str) -> tuple[str, bytes] | None:
    match = _PEM_BLOCK.search(text)
    if match is None:
        return None
    body = "".join(match.group(2).split())
    try:
        return match.group(1), base64.b64decode(body, validate=True)
    except ValueError:
        return None


def validate_pem_cert() -> Validator:
    """Accept a PEM ``CERTIFICATE`` block holding a DER public key."""

    def check(value: str) -> str:
        block = _decode_pem(value)
        if block is None or block[0] != "CERTIFICATE":
            raise ValidationError("failed to decode PEM block containing certificate")
        try:
            load_der_public_key(block[1])
        except (ValueError, TypeError) as exc:
            raise ValidationError(f"x509: failed to parse public key: {exc}") from None
        return value

    return check