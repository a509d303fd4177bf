"""
Private Cookie Crypto Core — key validation, nonces, sealing and unsealing.

Sealed format (before base64):
    [nonce 12B][encrypted_value + tag 16B]

The whole payload is encoded with standard base64 (with padding). No key id,
algorithm id or version is embedded; the cipher is fixed out-of-band.

Security Note:
    Never log key material, plaintext or ciphertext values.
    Nonces are random 96-bit; collision probability negligible under normal usage.
"""
import os
import base64
import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305

from ..exceptions import (
    ConfigurationError,
    InvalidKeyLength,
    BadEncoding,
    Malformed,
    AuthenticationFailed,
    InvalidUtf8,
    NonceGenerationError,
    CipherInitError,
)

logger = logging.getLogger("navigator.cookies")

KEY_LENGTH = 32  # AES-256 / ChaCha20
NONCE_SIZE = 12  # 96-bit nonce
TAG_SIZE = 16  # GCM / Poly1305 tag

CIPHERS: dict[str, type] = {
    "aesgcm": AESGCM,
    "chacha20": ChaCha20Poly1305,
}

# Resolve backend once at module load to prevent seal/unseal mismatch
# if the env var changes mid-process.
CIPHER_BACKEND = os.environ.get("NAV_COOKIE_CIPHER", "aesgcm").lower()


def get_cipher_cls(backend: str) -> type:
    """Return the AEAD cipher class registered under ``backend``.

    Raises:
        ConfigurationError: If the backend name is unknown.
    """
    try:
        return CIPHERS[backend]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported cipher backend: {backend}"
        ) from None


# ---------------------------------------------------------------------------
# Key material and nonces
# ---------------------------------------------------------------------------

def validate_key(key: bytes) -> bytes:
    """Check that ``key`` is exactly 32 bytes.

    Args:
        key: Raw secret key (bytes, bytearray or memoryview).

    Returns:
        The key as immutable bytes.

    Raises:
        InvalidKeyLength: If the key is not exactly 32 bytes long.
    """
    key = bytes(key)
    if len(key) != KEY_LENGTH:
        raise InvalidKeyLength(KEY_LENGTH, len(key))
    return key


def new_nonce() -> bytes:
    """Draw a fresh 12-byte nonce from the OS CSPRNG.

    Raises:
        NonceGenerationError: If the random source is unavailable.
    """
    try:
        nonce = os.urandom(NONCE_SIZE)
    except (OSError, NotImplementedError) as err:
        logger.error("Random source failed while generating nonce: %s", err)
        raise NonceGenerationError("couldn't random fill nonce") from err
    return nonce


def _make_cipher(key: bytes, backend: str):
    cipher_cls = get_cipher_cls(backend)
    try:
        return cipher_cls(key)
    except (TypeError, ValueError) as err:
        logger.error("Unable to initialize %s cipher: %s", backend, err)
        raise CipherInitError(f"{backend} key setup failed") from err


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def encode_payload(payload: bytes) -> str:
    """Encode a sealed payload as standard base64 text."""
    return base64.b64encode(payload).decode("ascii")


def decode_payload(value: str) -> bytes:
    """Decode standard base64 text back to a sealed payload.

    Only the canonical encoding produced by :func:`encode_payload` is
    accepted; text after the padding or non-zero trailing bits are rejected.

    Raises:
        BadEncoding: If ``value`` is not strictly valid base64.
    """
    try:
        payload = base64.b64decode(value, validate=True)
    except ValueError as err:
        # binascii.Error, or non-ASCII characters in a str
        raise BadEncoding("bad base64 value") from err
    if encode_payload(payload) != value:
        raise BadEncoding("non-canonical base64 value")
    return payload


# ---------------------------------------------------------------------------
# Seal / Unseal
# ---------------------------------------------------------------------------

def seal(plaintext: str, key: bytes, backend: str = CIPHER_BACKEND) -> str:
    """Encrypt and authenticate ``plaintext`` under ``key``.

    Args:
        plaintext: Text to seal.
        key: Validated 32-byte secret key.
        backend: AEAD backend name ("aesgcm" or "chacha20").

    Returns:
        base64 text of [nonce][ciphertext + tag].

    Raises:
        NonceGenerationError: If no nonce could be drawn.
        CipherInitError: If the cipher could not be built from ``key``.
    """
    cipher = _make_cipher(key, backend)
    nonce = new_nonce()
    sealed = cipher.encrypt(nonce, plaintext.encode("utf-8"), None)
    return encode_payload(nonce + sealed)


def unseal(encoded: str, key: bytes, backend: str = CIPHER_BACKEND) -> str:
    """Verify and decrypt a value produced by :func:`seal`.

    Args:
        encoded: base64 text of [nonce][ciphertext + tag].
        key: Validated 32-byte secret key.
        backend: AEAD backend name used when sealing.

    Returns:
        The original plaintext.

    Raises:
        BadEncoding: ``encoded`` is not valid base64.
        Malformed: Decoded payload is not longer than the nonce.
        AuthenticationFailed: Tag verification failed.
        InvalidUtf8: Decrypted bytes are not UTF-8.
        CipherInitError: If the cipher could not be built from ``key``.
    """
    data = decode_payload(encoded)
    if len(data) <= NONCE_SIZE:
        raise Malformed(
            f"decoded length {len(data)} is <= nonce size {NONCE_SIZE}"
        )
    cipher = _make_cipher(key, backend)
    nonce, sealed = data[:NONCE_SIZE], data[NONCE_SIZE:]
    try:
        plaintext = cipher.decrypt(nonce, sealed, None)
    except InvalidTag as err:
        raise AuthenticationFailed("invalid key/nonce/value: bad seal") from err
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidUtf8("bad unsealed utf8") from err
