"""Navigator Cookies exceptions.

Unseal failures (``UnsealError`` and subclasses) are never surfaced by
``PrivateJar.get``; they collapse into a missing cookie. Configuration and
operational errors always propagate to the caller.
"""


class CookieError(Exception):
    """Base class for all navigator_cookies errors."""


class ConfigurationError(CookieError, ValueError):
    """Invalid setup: wrong key, unknown cipher backend, bad env value."""


class InvalidKeyLength(ConfigurationError):
    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(
            f"bad key length: expected {expected} bytes, found {found}"
        )


# ---------------------------------------------------------------------------
# Unseal path
# ---------------------------------------------------------------------------

class UnsealError(CookieError):
    """A sealed value could not be opened."""


class DecodingError(UnsealError):
    pass


class BadEncoding(DecodingError):
    """Sealed value is not valid base64."""


class IntegrityError(UnsealError):
    pass


class Malformed(IntegrityError):
    """Decoded payload is too short to hold a nonce and ciphertext."""


class AuthenticationFailed(IntegrityError):
    """AEAD verification failed (tampered value, wrong key or corrupt data)."""


class EncodingError(UnsealError):
    pass


class InvalidUtf8(EncodingError):
    """Decrypted bytes are not valid UTF-8 text."""


# ---------------------------------------------------------------------------
# Operational failures
# ---------------------------------------------------------------------------

class OperationalError(CookieError, RuntimeError):
    """A cryptographic primitive failed for reasons unrelated to the input."""


class NonceGenerationError(OperationalError):
    pass


class CipherInitError(OperationalError):
    pass
