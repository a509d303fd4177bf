"""Cookie value type shared by the parent jar and the private jar."""
from typing import Optional

from pydantic import BaseModel


class Cookie(BaseModel):
    """A named cookie.

    Only ``name``, ``value``, ``path`` and ``domain`` are modeled; other
    attributes belong to whatever serializes the cookie to HTTP.
    """

    name: str
    value: str = ""
    path: Optional[str] = None
    domain: Optional[str] = None

    @classmethod
    def named(cls, name: str) -> "Cookie":
        """Build a value-less cookie, usable as a removal selector."""
        return cls(name=name)

    def with_value(self, value: str) -> "Cookie":
        """Return a copy of this cookie carrying ``value``."""
        return self.model_copy(update={"value": value})

    def __repr__(self) -> str:
        return (
            f"<Cookie name={self.name!r} path={self.path!r} "
            f"domain={self.domain!r}>"
        )
