import pytest

from safeurl import InvalidIpPort, IpPort, ip_port_to_string, make_ip_port


@pytest.mark.parametrize(
    "value,expected_port",
    [(0, 0), (80, 80), ("8080", 8080), (65535, 65535), ("443", 443)],
)
def test_make_ip_port(value, expected_port):
    port = make_ip_port(value)

    assert isinstance(port, IpPort)
    assert port == expected_port


def test_make_ip_port_returns_ip_ports_as_they_are():
    port = IpPort(8080)

    assert make_ip_port(port) is port


@pytest.mark.parametrize(
    "value", [-1, 65536, "", "80a", "-80", " 80", True, 8.0, None, b"80"]
)
def test_make_ip_port_raises_for_invalid_value(value):
    with pytest.raises(InvalidIpPort):
        make_ip_port(value)  # type: ignore


def test_invalid_ip_port_is_value_error():
    with pytest.raises(ValueError):
        IpPort(100000)


def test_ip_port_to_string():
    assert ip_port_to_string(IpPort(443)) == "443"
    assert ip_port_to_string(8080) == "8080"
    assert str(IpPort("0")) == "0"
    assert repr(IpPort(22)) == "<IpPort 22>"
