"""
IP port values, used for the `port` section of URLs.
"""

from typing import Union

from safeurl.exceptions import InvalidIpPort

MIN_IP_PORT = 0
MAX_IP_PORT = 65535


def _validate_port(value: Union[int, str]) -> int:
    # bool is a subclass of int, but True is not port 1
    if isinstance(value, bool):
        raise InvalidIpPort(value)

    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise InvalidIpPort(value)
        port = int(value)
    elif isinstance(value, int):
        port = int(value)
    else:
        raise InvalidIpPort(value)

    if port < MIN_IP_PORT or port > MAX_IP_PORT:
        raise InvalidIpPort(value)
    return port


class IpPort(int):
    """
    A validated IP port number. Instances behave like int.
    """

    def __new__(cls, value: Union[int, str]):
        return super().__new__(cls, _validate_port(value))

    def __repr__(self):
        return f"<IpPort {int(self)}>"

    def __str__(self):
        return ip_port_to_string(self)


def make_ip_port(value: Union[int, str, IpPort]) -> IpPort:
    """
    Returns the given value as IpPort, raising InvalidIpPort if it is not a
    port number. Strings are accepted if they contain only decimal digits.
    """
    if isinstance(value, IpPort):
        return value
    return IpPort(value)


def ip_port_to_string(port: Union[int, IpPort]) -> str:
    return str(int(port))
