import pytest

from ztnaconfig.enterprise_dns import data_source_schema, resource_schema
from ztnaconfig.schema import SchemaError

STEP1 = {
    "name": "ed-name",
    "description": "ed-description",
    "mapped_domains": [
        {"name": "step1.test1.com", "mapped_domain": "step1.test1.com"},
        {"name": "step1.test2.com", "mapped_domain": "step1.test2.com"},
    ],
}

STEP2 = {
    "name": "ed-name1",
    "description": "ed-description1",
    "mapped_domains": [
        {"name": "step2.test1.com", "mapped_domain": "step2.test1.com"},
        {"name": "step2.test2.com", "mapped_domain": "step2.test2.com"},
    ],
}


@pytest.mark.parametrize("config", [STEP1, STEP2])
def test_acceptance_configs_are_valid(config):
    validated = resource_schema().validate(config)
    assert validated["mapped_domains"][1]["name"] == config["mapped_domains"][1]["name"]
    assert validated == config


def test_with_defaults_keeps_blocks():
    filled = resource_schema().with_defaults(STEP1)
    assert filled["mapped_domains"][0]["mapped_domain"] == "step1.test1.com"
    assert filled["name"] == "ed-name"


def test_mapped_domains_required():
    with pytest.raises(SchemaError) as info:
        resource_schema().validate({"name": "ed-name"})
    assert info.value.errors[0].startswith("mapped_domains")


def test_bad_hostname_in_block_rejected():
    config = {
        "name": "ed-name",
        "mapped_domains": [{"name": "test-.com", "mapped_domain": "step1.test1.com"}],
    }
    with pytest.raises(SchemaError) as info:
        resource_schema().validate(config)
    assert info.value.errors == ['mapped_domains.0.name: "test-.com" is not a valid hostname']


def test_block_fields_required():
    config = {"name": "ed-name", "mapped_domains": [{"name": "step1.test1.com"}]}
    with pytest.raises(SchemaError) as info:
        resource_schema().validate(config)
    assert info.value.errors[0].startswith("mapped_domains.0.mapped_domain")


def test_data_source_lookup_by_id():
    assert data_source_schema().validate({"id": "ed-123"}) == {"id": "ed-123"}


def test_data_source_rejects_settable_blocks():
    with pytest.raises(SchemaError) as info:
        data_source_schema().validate({"id": "ed-123", "mapped_domains": STEP1["mapped_domains"]})
    assert info.value.errors[0].startswith("mapped_domains")


def test_data_source_requires_id():
    with pytest.raises(SchemaError) as info:
        data_source_schema().validate({})
    assert info.value.errors[0].startswith("id")