"""Repository configuration."""

from .settings import (
    DEFAULT_DISPLAY_NAME,
    DEFAULT_ENDPOINT,
    DEFAULT_REGION,
    GLOBAL_SIGNING_REGION,
    ENDPOINT_CHOICES,
    TYPE_OPTION_NAMES,
    ProxySettings,
    RepositoryConfig,
    derive_region,
    validate_options,
)

__all__ = [
    'DEFAULT_DISPLAY_NAME',
    'DEFAULT_ENDPOINT',
    'DEFAULT_REGION',
    'GLOBAL_SIGNING_REGION',
    'ENDPOINT_CHOICES',
    'TYPE_OPTION_NAMES',
    'ProxySettings',
    'RepositoryConfig',
    'derive_region',
    'validate_options'
]
