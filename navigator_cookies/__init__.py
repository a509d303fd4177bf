"""Navigator Cookies.

Cookie jar with a private (signed + encrypted) child jar.
"""
from .version import __version__
from .cookie import Cookie
from .jar import CookieJar
from .private import PrivateJar, PrivateJarConfig

__all__ = (
    "__version__",
    "Cookie",
    "CookieJar",
    "PrivateJar",
    "PrivateJarConfig",
)
