"""
Exception types shared across the registration package.
"""


class RegistrationError(Exception):
    """Base class for registration errors."""
    pass


class UnknownClassError(RegistrationError, ValueError):
    """Raised when a class id is not present in the catalog."""

    def __init__(self, class_id: object):
        super().__init__(f"Unknown class id: {class_id!r}")
        self.class_id = class_id


class GatewayConfigError(RegistrationError, ValueError):
    """Raised when the submission endpoint configuration is invalid."""
    pass
