"""
Tests for PrivateJar.

Tests cover:
- Eager key validation at construction
- add/get/remove through the private jar
- Tampered, foreign and plain cookies collapse to None
- Parent jar keeps the sealed (or corrupted) value
- Rejections are logged without the cookie value
"""
import logging

import pytest

from navigator_cookies import Cookie, CookieJar, PrivateJar, PrivateJarConfig
from navigator_cookies.exceptions import (
    ConfigurationError,
    InvalidKeyLength,
    NonceGenerationError,
)
from navigator_cookies.private import crypto


@pytest.fixture
def key():
    return bytes(range(32))


@pytest.fixture
def jar():
    return CookieJar()


@pytest.fixture
def private_jar(jar, key):
    return jar.private(key)


# --- Construction ---

class TestConstruction:

    @pytest.mark.parametrize("length", [0, 16, 31, 33, 64])
    def test_bad_key_fails_eagerly(self, jar, length):
        with pytest.raises(ConfigurationError):
            jar.private(b"k" * length)

    def test_bad_key_fails_on_direct_construction(self, jar):
        with pytest.raises(InvalidKeyLength):
            PrivateJar(jar, b"\x00" * 16)

    def test_valid_key(self, jar, key):
        private_jar = jar.private(key)
        assert private_jar.parent is jar

    def test_unknown_backend(self, jar, key):
        with pytest.raises(ConfigurationError):
            jar.private(key, backend="des")

    def test_from_config(self, jar, key):
        config = PrivateJarConfig(key=key, cipher_backend="chacha20")
        private_jar = PrivateJar.from_config(jar, config)
        private_jar.add(Cookie(name="n", value="text"))
        assert jar.private(key, backend="chacha20").get("n").value == "text"
        assert jar.private(key, backend="aesgcm").get("n") is None


# --- Simple behaviour ---

class TestSimpleBehaviour:

    def test_missing_cookie(self, private_jar):
        assert private_jar.get("name") is None

    def test_add_then_get(self, private_jar):
        private_jar.add(Cookie(name="name", value="value"))
        cookie = private_jar.get("name")
        assert cookie is not None
        assert cookie.name == "name"
        assert cookie.value == "value"

    def test_attributes_preserved(self, jar, private_jar):
        private_jar.add(Cookie(name="sid", value="abc", path="/app", domain="example.com"))
        cookie = private_jar.get("sid")
        assert cookie.path == "/app"
        assert cookie.domain == "example.com"
        assert jar.get("sid").path == "/app"

    def test_add_does_not_mutate_argument(self, private_jar):
        original = Cookie(name="n", value="text")
        private_jar.add(original)
        assert original.value == "text"

    def test_replace_value(self, private_jar):
        private_jar.add(Cookie(name="n", value="first"))
        private_jar.add(Cookie(name="n", value="second"))
        assert private_jar.get("n").value == "second"

    def test_multiple_cookies(self, jar, private_jar):
        for idx in range(5):
            private_jar.add(Cookie(name=f"c{idx}", value=f"v{idx}"))
        assert len(jar) == 5
        for idx in range(5):
            assert private_jar.get(f"c{idx}").value == f"v{idx}"

    def test_remove(self, jar, private_jar):
        private_jar.add(Cookie(name="name", value="value"))
        assert private_jar.get("name") is not None
        private_jar.remove(Cookie.named("name"))
        assert private_jar.get("name") is None
        assert jar.get("name") is None


# --- Secure behaviour ---

class TestSecureBehaviour:

    def test_parent_holds_sealed_value(self, jar, private_jar):
        private_jar.add(Cookie(name="n", value="text"))
        stored = jar.get("n")
        assert stored is not None
        assert stored.value != "text"
        assert private_jar.get("n").value == "text"

    def test_tampered_cookie_is_absent_but_still_stored(self, jar, private_jar):
        private_jar.add(Cookie(name="n", value="text"))
        corrupted = jar.get("n").value + "!"
        jar.add(Cookie(name="n", value=corrupted))
        assert private_jar.get("n") is None
        assert jar.get("n") is not None
        assert jar.get("n").value == corrupted

    @pytest.mark.parametrize("suffix", ["!", "A", "=", "AAAA"])
    def test_any_appended_character_rejected(self, jar, private_jar, suffix):
        private_jar.add(Cookie(name="n", value="text"))
        jar.add(Cookie(name="n", value=jar.get("n").value + suffix))
        assert private_jar.get("n") is None

    def test_plain_cookie_is_absent(self, jar, private_jar):
        jar.add(Cookie(name="plain", value="not sealed"))
        assert private_jar.get("plain") is None
        assert jar.get("plain").value == "not sealed"

    def test_other_key_cannot_read(self, jar, private_jar):
        private_jar.add(Cookie(name="n", value="text"))
        assert jar.private(bytes(range(1, 33))).get("n") is None

    def test_remove_then_lookup(self, jar, private_jar):
        private_jar.add(Cookie(name="n", value="text"))
        private_jar.remove(Cookie.named("n"))
        assert private_jar.get("n") is None
        assert jar.get("n") is None

    def test_same_value_seals_differently(self, jar, key):
        jar.private(key).add(Cookie(name="a", value="same"))
        jar.private(key).add(Cookie(name="b", value="same"))
        assert jar.get("a").value != jar.get("b").value


# --- Diagnostics and operational errors ---

class TestDiagnostics:

    def test_rejection_logged_without_value(self, jar, private_jar, caplog):
        private_jar.add(Cookie(name="n", value="text"))
        stored = jar.get("n").value
        jar.add(Cookie(name="n", value=stored + "!"))
        with caplog.at_level(logging.DEBUG, logger="navigator.cookies"):
            assert private_jar.get("n") is None
        assert "BadEncoding" in caplog.text
        assert stored not in caplog.text

    def test_missing_cookie_not_logged(self, private_jar, caplog):
        with caplog.at_level(logging.DEBUG, logger="navigator.cookies"):
            assert private_jar.get("absent") is None
        assert caplog.records == []

    def test_random_failure_propagates(self, jar, private_jar, monkeypatch):
        def broken_urandom(size):
            raise OSError("no entropy")

        monkeypatch.setattr(crypto.os, "urandom", broken_urandom)
        with pytest.raises(NonceGenerationError):
            private_jar.add(Cookie(name="n", value="text"))
        assert jar.get("n") is None
