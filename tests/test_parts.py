import pytest

from safeurl import (
    HostnameHRefParts,
    InvalidIpPort,
    PRHRefParts,
    RelativeHRefParts,
    href_parts_from_mapping,
    is_href_parts_with_hostname,
    is_href_parts_with_pathname,
    is_pr_href_parts,
)


@pytest.mark.parametrize(
    "value",
    [
        {"protocol_relative": True, "hostname": "hello world"},
        {"protocol_relative": False, "hostname": "hello world"},
        PRHRefParts(hostname="example.com"),
    ],
)
def test_is_pr_href_parts(value):
    assert is_pr_href_parts(value) is True


@pytest.mark.parametrize(
    "value",
    [
        {"hostname": "example.com"},
        {"protocol_relative": "true", "hostname": "example.com"},
        {"protocol_relative": "false", "hostname": "example.com"},
        {"protocol_relative": True, "not_a_hostname": "example.com"},
        {"protocol_relative": False, "not_a_hostname": "example.com"},
        {"protocol_relative": True, "hostname": True},
        {"protocol_relative": False, "hostname": True},
        HostnameHRefParts(hostname="example.com"),
        "//example.com",
        None,
    ],
)
def test_is_not_pr_href_parts(value):
    assert is_pr_href_parts(value) is False


def test_is_href_parts_with_hostname():
    assert is_href_parts_with_hostname({"hostname": "example.com"}) is True
    assert is_href_parts_with_hostname(HostnameHRefParts(hostname="a")) is True
    assert is_href_parts_with_hostname(PRHRefParts(hostname="a")) is True
    assert is_href_parts_with_hostname({"hostname": 1}) is False
    assert is_href_parts_with_hostname(RelativeHRefParts(pathname="/")) is False


@pytest.mark.parametrize(
    "value,expected_result",
    [
        [{"pathname": "hello world"}, True],
        [{"not_a_pathname": "hello world"}, False],
        [{"pathname": True}, False],
        [RelativeHRefParts(pathname="/a"), True],
        [RelativeHRefParts(), False],
        [HostnameHRefParts(hostname="a", pathname="/"), True],
    ],
)
def test_is_href_parts_with_pathname(value, expected_result):
    assert is_href_parts_with_pathname(value) is expected_result


def test_href_parts_from_mapping():
    assert href_parts_from_mapping(
        {"protocol_relative": True, "hostname": "example.com", "pathname": "/a"}
    ) == PRHRefParts(hostname="example.com", pathname="/a")

    assert href_parts_from_mapping(
        {"protocol": "https", "hostname": "example.com", "port": "8443"}
    ) == HostnameHRefParts(protocol="https", hostname="example.com", port=8443)

    assert href_parts_from_mapping(
        {"pathname": "/a", "search": "", "hash": "#b"}
    ) == RelativeHRefParts(pathname="/a", hash="#b")


def test_href_parts_from_mapping_validates_the_port():
    with pytest.raises(InvalidIpPort):
        href_parts_from_mapping({"hostname": "example.com", "port": 70000})
