"""In-memory cookie jar, the parent collection for private jars."""
from typing import Optional
from collections.abc import Iterator

from .cookie import Cookie
from .private.crypto import CIPHER_BACKEND
from .private.private_jar import PrivateJar


class CookieJar:
    """Collection of cookies keyed by name.

    Adding a cookie replaces any cookie with the same name.
    """

    def __init__(self) -> None:
        self._cookies: dict[str, Cookie] = {}

    def __repr__(self) -> str:
        return f'<CookieJar names={list(self._cookies.keys())}>'

    def get(self, name: str) -> Optional[Cookie]:
        return self._cookies.get(name)

    def add(self, cookie: Cookie) -> None:
        self._cookies[cookie.name] = cookie

    def remove(self, cookie: Cookie) -> None:
        """Remove the stored cookie matching ``cookie``.

        The name must match. ``path`` and ``domain`` are compared only when
        set on the given cookie, so ``Cookie.named(name)`` removes by name.
        Removing a cookie that is not in the jar is a no-op.
        """
        stored = self._cookies.get(cookie.name)
        if stored is None:
            return
        if cookie.path is not None and cookie.path != stored.path:
            return
        if cookie.domain is not None and cookie.domain != stored.domain:
            return
        del self._cookies[cookie.name]

    def clear(self) -> None:
        self._cookies = {}

    def private(self, key: bytes, backend: str = CIPHER_BACKEND) -> PrivateJar:
        """Return a PrivateJar with this jar as its parent.

        Any change made through the child is reflected here, and every
        read through the child is made from here.

        Raises:
            InvalidKeyLength: If ``key`` is not exactly 32 bytes long.
        """
        return PrivateJar(self, key, backend=backend)

    # --- Magic Methods ---

    def __len__(self) -> int:
        return len(self._cookies)

    def __iter__(self) -> Iterator[Cookie]:
        return iter(list(self._cookies.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._cookies
