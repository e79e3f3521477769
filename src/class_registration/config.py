"""
Module: config

Purpose:
    Fixed configuration for the registration form: the submission
    endpoint, the program name and the class catalog. Immutable
    configuration with validation on construction.

Key Classes:
    - RegistrationConfig: Main configuration object

Used By:
    - gui.app: Composition root
    - core.form_state.RegistrationForm
    - submission.gateway.RequestsTransport
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple
from urllib.parse import urlparse

from class_registration.core.models.catalog import ClassOption
from class_registration.errors import GatewayConfigError

DEFAULT_ENDPOINT_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbyHQa0U0sVBKjLtOsNpJtSoZvV5VH0Z_eMqszumyQlEpKfYfD0Tuhpju-yCjT7uce5x/exec"
)

# Program names are the same for all classes for now
DEFAULT_PROGRAM_NAME = "Program Name"

DEFAULT_CLASSES: Tuple[ClassOption, ...] = ClassOption.numbered(10)


@dataclass(frozen=True)
class RegistrationConfig:
    """
    Configuration for the registration form (immutable).

    Attributes:
        endpoint_url: Spreadsheet web app URL receiving the POST
        program_name: Program sent with every registration
        classes: Ordered class catalog shown in the selector
        timeout: Seconds to wait for the POST, None waits indefinitely

    Example:
        >>> config = RegistrationConfig(endpoint_url="https://example.com/exec")
        >>> config.program_name
        'Program Name'
    """

    endpoint_url: str = DEFAULT_ENDPOINT_URL
    program_name: str = DEFAULT_PROGRAM_NAME
    classes: Tuple[ClassOption, ...] = field(default=DEFAULT_CLASSES)
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        parsed = urlparse(self.endpoint_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise GatewayConfigError(f"endpoint_url must be an http(s) URL: {self.endpoint_url!r}")
        if self.timeout is not None and self.timeout <= 0:
            raise GatewayConfigError(f"timeout must be positive: {self.timeout}")
        if not self.program_name:
            raise ValueError("program_name cannot be empty")
        ids = [c.id for c in self.classes]
        if len(ids) != len(set(ids)):
            raise ValueError(f"class ids must be unique: {ids}")

    @classmethod
    def default(cls) -> RegistrationConfig:
        return cls()
