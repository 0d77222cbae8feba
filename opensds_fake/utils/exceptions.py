"""Custom exceptions for the OpenSDS fake API layer"""


class FakeSDSException(Exception):
    """Base exception for the fake API layer"""
    pass


class BackendFailureError(FakeSDSException):
    """Raised when the backend envelope reports a failure"""

    def __init__(self, error: str):
        super().__init__(error)
        self.error = error


class ResponseDecodeError(FakeSDSException):
    """Raised when a successful envelope carries a body that cannot be decoded"""
    pass


class ConfigurationException(FakeSDSException):
    """Exception raised for configuration errors"""
    pass
