"""
Private Jar Configuration — key loading and validated settings.

Reads the cookie key from environment variables:
    NAV_COOKIE_KEY = <base64-encoded 32-byte key>
    NAV_COOKIE_CIPHER = aesgcm | chacha20 (optional, default aesgcm)

Security Note:
    Never log key material. Only log key lengths and backend names.
"""
import os
import base64
import binascii
import logging

from pydantic import BaseModel, Field, field_validator

from ..exceptions import ConfigurationError
from .crypto import CIPHERS, validate_key

logger = logging.getLogger("navigator.cookies")


def load_cookie_key(env_var: str = "NAV_COOKIE_KEY") -> bytes:
    """Load the private cookie key from an environment variable.

    The value must be base64-encoded and decode to exactly 32 bytes.

    Args:
        env_var: Name of the environment variable holding the key.

    Returns:
        Raw 32-byte key.

    Raises:
        RuntimeError: If the variable is not set.
        ConfigurationError: If the value is not valid base64.
        InvalidKeyLength: If the key does not decode to exactly 32 bytes.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        raise RuntimeError(
            f"{env_var} environment variable is not set. "
            f"Set {env_var}=<base64-encoded-32-byte-key>"
        )
    try:
        key_bytes = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as err:
        raise ConfigurationError(f"{env_var} is not valid base64") from err
    key_bytes = validate_key(key_bytes)
    logger.debug("Loaded private cookie key from %s (%d bytes)", env_var, len(key_bytes))
    return key_bytes


class PrivateJarConfig(BaseModel):
    """Validated private jar configuration."""

    key: bytes = Field(repr=False)
    cipher_backend: str = Field(default="aesgcm")

    @field_validator("key", mode="before")
    @classmethod
    def validate_key_length(cls, v) -> bytes:
        """Ensure the key is exactly 32 bytes."""
        if isinstance(v, (bytearray, memoryview)):
            v = bytes(v)
        if not isinstance(v, bytes):
            raise ValueError("key must be raw bytes")
        # InvalidKeyLength is a ValueError, reported as a validation error
        return validate_key(v)

    @field_validator("cipher_backend")
    @classmethod
    def validate_cipher(cls, v: str) -> str:
        """Validate cipher backend is supported."""
        v = v.lower()
        if v not in CIPHERS:
            raise ValueError(f"Unsupported cipher backend: {v}")
        return v

    @classmethod
    def from_env(cls) -> "PrivateJarConfig":
        """Create PrivateJarConfig by loading values from environment.

        Returns:
            Populated PrivateJarConfig instance.
        """
        key = load_cookie_key()
        cipher_backend = os.environ.get("NAV_COOKIE_CIPHER", "aesgcm")
        return cls(key=key, cipher_backend=cipher_backend)
