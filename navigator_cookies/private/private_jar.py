"""
PrivateJar — a child cookie jar providing authenticated encryption.

Cookies added through a ``PrivateJar`` are sealed before they reach the
parent jar; cookies read through it are verified and decrypted. Clients can
neither read nor tamper with the values, nor fabricate new ones.

- ``get(name)`` — look up and unseal a cookie; ``None`` if missing or invalid
- ``add(cookie)`` — seal the value and add the cookie to the parent
- ``remove(cookie)`` — remove the cookie from the parent

Security Note:
    ``get`` never reveals *why* a value failed to open: a missing cookie,
    a tampered one and one sealed under another key all return ``None``.
    The reason is logged at DEBUG level only, without the value.
"""
import logging
from typing import Any, Optional

from ..cookie import Cookie
from ..exceptions import UnsealError
from .crypto import CIPHER_BACKEND, get_cipher_cls, validate_key, seal, unseal

logger = logging.getLogger("navigator.cookies")


class PrivateJar:
    """Encrypting view over a parent cookie jar.

    The parent jar and the key are borrowed: a ``PrivateJar`` owns no state,
    is cheap to build per request, and must not outlive either of them.

    Args:
        parent: Jar providing ``get(name)``, ``add(cookie)`` and
            ``remove(cookie)``.
        key: Secret key, exactly 32 cryptographically random bytes.
        backend: AEAD backend name ("aesgcm" or "chacha20").

    Raises:
        InvalidKeyLength: If ``key`` is not exactly 32 bytes long.
        ConfigurationError: If ``backend`` is unknown.
    """

    def __init__(
        self,
        parent: Any,
        key: bytes,
        backend: str = CIPHER_BACKEND,
    ):
        self._key = validate_key(key)
        get_cipher_cls(backend)
        self._backend = backend
        self._parent = parent

    @classmethod
    def from_config(cls, parent: Any, config: Any) -> "PrivateJar":
        """Build a PrivateJar from a ``PrivateJarConfig``."""
        return cls(parent, config.key, backend=config.cipher_backend)

    def __repr__(self) -> str:
        return f"<PrivateJar backend={self._backend} parent={self._parent!r}>"

    @property
    def parent(self) -> Any:
        return self._parent

    def get(self, name: str) -> Optional[Cookie]:
        """Return the cookie ``name`` with its value verified and decrypted.

        Args:
            name: Cookie name.

        Returns:
            A copy of the cookie carrying the plaintext value, or None if the
            cookie is missing or fails to authenticate or decrypt.
        """
        cookie = self._parent.get(name)
        if cookie is None:
            return None
        try:
            value = unseal(cookie.value, self._key, self._backend)
        except UnsealError as err:
            logger.debug(
                "Private cookie %s rejected: %s", name, type(err).__name__,
            )
            return None
        return cookie.with_value(value)

    def add(self, cookie: Cookie) -> None:
        """Seal the cookie's value and add the cookie to the parent jar.

        The caller's cookie is left untouched; the parent receives a copy
        whose value is the sealed, base64-encoded payload.
        """
        sealed = seal(cookie.value, self._key, self._backend)
        self._parent.add(cookie.with_value(sealed))

    def remove(self, cookie: Cookie) -> None:
        """Remove ``cookie`` from the parent jar.

        Matching is done by the parent: pass the same ``path`` and ``domain``
        the cookie was set with.
        """
        self._parent.remove(cookie)
