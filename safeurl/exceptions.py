from typing import Optional

DEFAULT_DATA_PATH = "object"


class SafeURLError(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class InvalidURLData(SafeURLError):
    """
    Raised when a value cannot be used as a URL, on its own or combined with
    a base URL.
    """

    def __init__(
        self,
        data_path: str,
        input: str,
        inner_exception: Optional[Exception] = None,
    ):
        super().__init__(f"Invalid URL data at {data_path}: {input}")
        self.data_path = data_path
        self.input = input
        self.inner_exception = inner_exception


class InvalidIpPort(SafeURLError, ValueError):
    def __init__(self, value):
        super().__init__(
            f"Expected an IP port number between 0 and 65535; got instead {value!r}"
        )
        self.value = value
