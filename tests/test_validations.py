import re

import pytest

from ztnaconfig.validations import (
    PRIVILEGES_PATTERN,
    ValidationError,
    compose_or_validations,
    validate_cidr4,
    validate_dns,
    validate_domain_name,
    validate_email,
    validate_hostname,
    validate_hostname_or_ipv4,
    validate_http_net_location,
    validate_id,
    validate_int_enum,
    validate_int_range,
    validate_json,
    validate_pattern,
    validate_pem_cert,
    validate_string_enum,
    validate_string_to_int_range,
    validate_url,
    validate_wildcard_hostname,
)

PEM_BODY = """MIICIjANBgkqhkiG9w0BAQEFAAOCAg8AMIICCgKCAgEAlRuRnThUjU8/prwYxbty
WPT9pURI3lbsKMiB6Fn/VHOKE13p4D8xgOCADpdRagdT6n4etr9atzDKUSvpMtR3
CP5noNc97WiNCggBjVWhs7szEe8ugyqF23XwpHQ6uV1LKH50m92MbOWfCtjU9p/x
qhNpQQ1AZhqNy5Gevap5k8XzRmjSldNAFZMY7Yv3Gi+nyCwGwpVtBUwhuLzgNFK/
yDtw2WcWmUU7NuC8Q6MWvPebxVtCfVp/iQU6q60yyt6aGOBkhAX0LpKAEhKidixY
nP9PNVBvxgu3XZ4P36gZV6+ummKdBVnc3NqwBLu5+CcdRdusmHPHd5pHf4/38Z3/
6qU2a/fPvWzceVTEgZ47QjFMTCTmCwNt29cvi7zZeQzjtwQgn4ipN9NibRH/Ax/q
TbIzHfrJ1xa2RteWSdFjwtxi9C20HUkjXSeI4YlzQMH0fPX6KCE7aVePTOnB69I/
a9/q96DiXZajwlpq3wFctrs1oXqBp5DVrCIj8hU2wNgB7LtQ1mCtsYz//heai0K9
PhE4X6hiE0YmeAZjR0uHl8M/5aW9xCoJ72+12kKpWAa0SFRWLy6FejNYCYpkupVJ
yecLk/4L1W0l6jQQZnWErXZYe0PNFcmwGXy1Rep83kfBRNKRy5tvocalLlwXLdUk
AIU+2GKjyT3iMuzZxxFxPFMCAwEAAQ=="""

GOOD_PEM = "\n-----BEGIN CERTIFICATE-----\n" + PEM_BODY + "\n-----END CERTIFICATE-----"
BAD_PEM = GOOD_PEM.replace("MIICIjAN", "ErrorjAN")


def test_string_enum():
    assert validate_string_enum("test3", "test2", "test1")("test1") == "test1"
    with pytest.raises(ValidationError):
        validate_string_enum("test3", "test2", "test1")("test4")


def test_int_enum():
    assert validate_int_enum(3, 2, 1)(1) == 1
    with pytest.raises(ValidationError):
        validate_int_enum(3, 2, 1)(4)


@pytest.mark.parametrize(
    "value,numeric,prefixes",
    [("ne-123", True, ["ne"]), ("ne-123", True, ["ed", "ne"])],
)
def test_id_positive(value, numeric, prefixes):
    assert validate_id(numeric, *prefixes)(value) == value


@pytest.mark.parametrize(
    "value,numeric",
    [("12345", False), ("ne-", False), ("ne-abc", True), ("ne-!@#", True)],
)
def test_id_negative(value, numeric):
    with pytest.raises(ValidationError):
        validate_id(numeric, "ne")(value)


def test_pattern():
    assert validate_pattern(re.compile(r"test[\d]+"))("test123") == "test123"
    with pytest.raises(ValidationError):
        validate_pattern(re.compile(r"[\d]+"))("abcd")


def test_hostname():
    assert validate_hostname()("test.com") == "test.com"
    for bad in ["test.com.", "test-.com", ""]:
        with pytest.raises(ValidationError):
            validate_hostname()(bad)


def test_wildcard_hostname():
    assert validate_wildcard_hostname()("*.test.com") == "*.test.com"
    with pytest.raises(ValidationError):
        validate_wildcard_hostname()("*.test-.com")


def test_int_range():
    assert validate_int_range(1, 2)(2) == 2
    with pytest.raises(ValidationError):
        validate_int_range(1, 2)(3)


def test_string_to_int_range():
    check = validate_string_to_int_range(0, 60)
    assert check("") == ""
    assert check("60") == "60"
    for bad in ["61", "-1", "abc"]:
        with pytest.raises(ValidationError):
            check(bad)


@pytest.mark.parametrize("value", ["test.com", "127.0.0.1"])
def test_hostname_or_ipv4_positive(value):
    assert validate_hostname_or_ipv4()(value) == value


@pytest.mark.parametrize("value", ["127.0.0.1.", "test.com.", "test-.com"])
def test_hostname_or_ipv4_negative(value):
    with pytest.raises(ValidationError):
        validate_hostname_or_ipv4()(value)


def test_privileges_pattern():
    for priv in ["orgs:read", "users:write", "network_elements:read", "tenant_restrictions:write"]:
        assert PRIVILEGES_PATTERN.fullmatch(priv)
    for priv in ["abcde", "read", "write", "test123:read"]:
        assert PRIVILEGES_PATTERN.fullmatch(priv) is None


@pytest.mark.parametrize(
    "value",
    [
        "simple@example.com",
        "very.common@example.com",
        "user.name+tag+sorting@example.com",
        "other.email-with-hyphen@example.com",
        "#!$%&'*+-/=?^_`{}|~@example.org",
    ],
)
def test_email_positive(value):
    assert validate_email()(value) == value


@pytest.mark.parametrize(
    "value",
    [
        "invalid.email",
        "invalid@user@example.com",
        "abc.def @valid.email",
        "john..doe@example.com",
        ".john.doe@example.com",
        "john.doe.@example.com",
        "john.doe@.example.com",
        "john.doe@example.com.",
    ],
)
def test_email_negative(value):
    with pytest.raises(ValidationError):
        validate_email()(value)


@pytest.mark.parametrize(
    "value",
    ["http://google.com/", "https://hooks.slack.com/services/test/1", "https://www.dumpsters.com:443"],
)
def test_url_positive(value):
    assert validate_url()(value) == value


@pytest.mark.parametrize(
    "value", ["http//google.com", "google.com", "https", "", "alskjff#?asf//dfas"]
)
def test_url_negative(value):
    with pytest.raises(ValidationError):
        validate_url()(value)


@pytest.mark.parametrize("value", ["http://google.com", "https://google.com:123"])
def test_net_location_positive(value):
    assert validate_http_net_location()(value) == value


@pytest.mark.parametrize(
    "value",
    [
        "http://google.com:abc",
        "http://google.com/test",
        "http://google.com?test=1",
        "httpr://google.com?test=1",
        "rdp://google.com",
    ],
)
def test_net_location_negative(value):
    with pytest.raises(ValidationError):
        validate_http_net_location()(value)


def test_json():
    good = ['{"value1":"1", "value2": 2}', '[{"value1":"1", "value2": 2}, {"value1": "1"}]']
    for value in good:
        assert validate_json()(value) == value
    for bad in ["no-json-string", '{"test1": 2']:
        with pytest.raises(ValidationError):
            validate_json()(bad)


@pytest.mark.parametrize(
    "first,second", [("123", "123"), ("1234", "123"), ("123", "1234")]
)
def test_compose_or_positive(first, second):
    check = compose_or_validations(validate_string_enum(first), validate_string_enum(second))
    assert check("123") == "123"


def test_compose_or_negative_collects_all_messages():
    check = compose_or_validations(validate_string_enum("1234"), validate_string_enum("1234"))
    with pytest.raises(ValidationError) as info:
        check("123")
    assert len(info.value.messages) == 2


def test_dns():
    assert validate_dns()("test.com") == "test.com"
    for bad in ["test.com.", "test-.com", "test_1.com", "localhost"]:
        with pytest.raises(ValidationError):
            validate_dns()(bad)


def test_domain_name():
    assert validate_domain_name()("") == ""
    assert validate_domain_name()("test.com") == "test.com"
    with pytest.raises(ValidationError):
        validate_domain_name()("test-.com")


def test_cidr4():
    assert validate_cidr4()("192.0.2.0/24") == "192.0.2.0/24"


@pytest.mark.parametrize(
    "value",
    ["192.0.2.1/24", "test.com.1234", "192.0.2.1", "192.0.2.1111/12", "2001:db8:a0b:12f0::1/32", "testtttt"],
)
def test_cidr4_negative(value):
    with pytest.raises(ValidationError):
        validate_cidr4()(value)


def test_pem_cert():
    assert validate_pem_cert()(GOOD_PEM) == GOOD_PEM
    with pytest.raises(ValidationError):
        validate_pem_cert()(BAD_PEM)
    with pytest.raises(ValidationError):
        validate_pem_cert()(GOOD_PEM.replace("CERTIFICATE", "PUBLIC KEY"))