"""Error policy of a single backend fetch: raise, or return a fallback value."""

import copy
from typing import Any


class FetchPolicy:
    """Selects strict or graceful behaviour for the CMS transports.

    Usage::

        await client.do_query(QUERY, policy=FetchPolicy.strict())
        await client.do_query(QUERY, policy=FetchPolicy.graceful({"posts": {"nodes": []}}))
    """

    RAISE = "raise"
    FALLBACK = "fallback"

    def __init__(self, on_error: str = RAISE, fallback: Any = None):
        if on_error not in (self.RAISE, self.FALLBACK):
            raise ValueError(f"Unsupported fetch policy '{on_error}'.")
        self.on_error = on_error
        self._fallback = fallback

    @classmethod
    def strict(cls) -> "FetchPolicy":
        return cls(cls.RAISE)

    @classmethod
    def graceful(cls, fallback: Any) -> "FetchPolicy":
        return cls(cls.FALLBACK, fallback)

    @property
    def is_graceful(self) -> bool:
        return self.on_error == self.FALLBACK

    def get_fallback(self) -> Any:
        # callers may mutate what they get back
        return copy.deepcopy(self._fallback)

    def __repr__(self) -> str:
        return f"FetchPolicy(on_error={self.on_error!r})"
