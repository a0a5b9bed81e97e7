"""
Configuration for the Amazon S3 links repository.
"""

import os
import re
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import quote

# Known regional endpoints offered in the repository type form
ENDPOINT_CHOICES = [
    "s3.amazonaws.com",
    "s3-external-1.amazonaws.com",
    "s3-us-west-2.amazonaws.com",
    "s3-us-west-1.amazonaws.com",
    "s3-eu-west-1.amazonaws.com",
    "s3.eu-central-1.amazonaws.com",
    "s3-eu-central-1.amazonaws.com",
    "s3-ap-southeast-1.amazonaws.com",
    "s3-ap-southeast-2.amazonaws.com",
    "s3-ap-northeast-1.amazonaws.com",
    "s3-sa-east-1.amazonaws.com",
]

DEFAULT_ENDPOINT = "s3.amazonaws.com"
DEFAULT_REGION = "ap-southeast-2"
DEFAULT_DISPLAY_NAME = "Amazon S3 links"

# Signing region of the global endpoint, which carries no region in its name
GLOBAL_SIGNING_REGION = "us-east-1"

# Option names stored by the host for this repository type
TYPE_OPTION_NAMES = ["access_key", "secret_key", "endpoint", "pluginname"]

REGION_PATTERN = re.compile(r"s3[.-]([^.]+)\.amazonaws\.com")

PROXY_TYPES = {
    "HTTP": "http",
    "SOCKS5": "socks5",
}

# Environment variables read by the command line entry point
ENV_PREFIX = "S3_LINKS_"


def derive_region(endpoint: Optional[str]) -> str:
    """
    Extract the region from an S3 endpoint hostname.

    Args:
        endpoint: Endpoint hostname, e.g. ``s3-eu-west-1.amazonaws.com``

    Returns:
        The region token, or ``DEFAULT_REGION`` when the endpoint does not
        follow the regional naming scheme
    """
    if endpoint:
        match = REGION_PATTERN.search(endpoint)
        if match:
            return match.group(1)
    return DEFAULT_REGION


def validate_options(options: Dict[str, Optional[str]]) -> Dict[str, str]:
    """
    Check repository type options the way the configuration form does.

    Args:
        options: Submitted option values keyed by option name

    Returns:
        Mapping of option name to error message; empty when valid
    """
    errors = {}
    for name in ("access_key", "secret_key"):
        if not (options.get(name) or "").strip():
            errors[name] = "Required"

    endpoint = options.get("endpoint")
    if endpoint and endpoint not in ENDPOINT_CHOICES:
        errors["endpoint"] = f"Unknown endpoint '{endpoint}'"
    return errors


@dataclass(frozen=True)
class ProxySettings:
    """Host-wide HTTP proxy forwarded to the S3 client."""
    host: str
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None
    type: str = "HTTP"

    @property
    def proxy_url(self) -> str:
        """Proxy URL understood by botocore."""
        scheme = PROXY_TYPES.get(self.type.upper(), "http")
        netloc = self.host if not self.port else f"{self.host}:{self.port}"
        # Credentials are only sent when both halves are configured
        if self.user and self.password:
            credentials = f"{quote(self.user, safe='')}:{quote(self.password, safe='')}"
            netloc = f"{credentials}@{netloc}"
        return f"{scheme}://{netloc}"

    def as_botocore_proxies(self) -> Dict[str, str]:
        """Proxy mapping for ``botocore.config.Config(proxies=...)``."""
        url = self.proxy_url
        return {"http": url, "https": url}

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> Optional["ProxySettings"]:
        """Build proxy settings from ``S3_LINKS_PROXY_*`` variables, if any."""
        environ = os.environ if environ is None else environ
        host = environ.get(f"{ENV_PREFIX}PROXY_HOST")
        if not host:
            return None

        port = environ.get(f"{ENV_PREFIX}PROXY_PORT")
        return cls(
            host=host,
            port=int(port) if port else None,
            user=environ.get(f"{ENV_PREFIX}PROXY_USER"),
            password=environ.get(f"{ENV_PREFIX}PROXY_PASSWORD"),
            type=environ.get(f"{ENV_PREFIX}PROXY_TYPE", "HTTP"),
        )


@dataclass(frozen=True)
class RepositoryConfig:
    """
    Immutable settings for one S3 links repository instance.

    The region is derived from the configured endpoint once, when the
    config is created. A missing endpoint falls back to ``DEFAULT_ENDPOINT``
    but still derives the default region.
    """
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    endpoint: str = DEFAULT_ENDPOINT
    region: str = DEFAULT_REGION
    display_name: str = DEFAULT_DISPLAY_NAME

    @classmethod
    def create(cls, access_key: Optional[str] = None, secret_key: Optional[str] = None,
               endpoint: Optional[str] = None,
               display_name: Optional[str] = None) -> "RepositoryConfig":
        """Create a config, deriving the region from the endpoint."""
        return cls(
            access_key=access_key,
            secret_key=secret_key,
            endpoint=endpoint or DEFAULT_ENDPOINT,
            region=derive_region(endpoint),
            display_name=display_name or DEFAULT_DISPLAY_NAME,
        )

    @classmethod
    def from_options(cls, options: Dict[str, Optional[str]]) -> "RepositoryConfig":
        """Create a config from the options the host stores for this type."""
        return cls.create(
            access_key=options.get("access_key"),
            secret_key=options.get("secret_key"),
            endpoint=options.get("endpoint"),
            display_name=options.get("pluginname"),
        )

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "RepositoryConfig":
        """Create a config from ``S3_LINKS_*`` environment variables."""
        environ = os.environ if environ is None else environ
        return cls.create(
            access_key=environ.get(f"{ENV_PREFIX}ACCESS_KEY"),
            secret_key=environ.get(f"{ENV_PREFIX}SECRET_KEY"),
            endpoint=environ.get(f"{ENV_PREFIX}ENDPOINT"),
            display_name=environ.get(f"{ENV_PREFIX}NAME"),
        )

    @property
    def endpoint_url(self) -> str:
        """Endpoint as a URL for the S3 client."""
        return f"https://{self.endpoint}"

    @property
    def has_access_key(self) -> bool:
        return bool(self.access_key)

    @property
    def has_regional_endpoint(self) -> bool:
        """Whether the endpoint name carries its own region."""
        return bool(REGION_PATTERN.search(self.endpoint))

    def client_credentials(self) -> Dict[str, str]:
        """
        Explicit credentials for the S3 client.

        Empty unless both keys are set; botocore rejects a half pair.
        """
        if self.access_key and self.secret_key:
            return {
                "aws_access_key_id": self.access_key,
                "aws_secret_access_key": self.secret_key,
            }
        return {}
