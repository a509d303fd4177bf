"""Private Jar — authenticated encryption for cookie values.

Security Note (Threat Model):
    The key is held in process memory for as long as a PrivateJar exists,
    and decrypted values exist in memory after ``get``. A memory dump of
    the application process could expose both. This is an accepted
    limitation.
"""

from .private_jar import PrivateJar
from .config import PrivateJarConfig, load_cookie_key
from .crypto import seal, unseal, validate_key

__all__ = [
    "PrivateJar",
    "PrivateJarConfig",
    "load_cookie_key",
    "seal",
    "unseal",
    "validate_key",
]
