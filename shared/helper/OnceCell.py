"""Write-once container for lazily computed, process-wide values."""

from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")


class OnceCell(Generic[T]):
    """Holds a value that is computed at most once successfully.

    Concurrent first callers may all run the factory; the first one to finish
    wins and later results are discarded. A factory that raises leaves the
    cell empty, so the next caller tries again.
    """

    def __init__(self) -> None:
        self._value: T | None = None
        self._is_set = False

    def is_set(self) -> bool:
        return self._is_set

    def get(self) -> T | None:
        return self._value

    def set(self, value: T) -> T:
        """Store value unless the cell is already populated; return the stored value."""
        if not self._is_set:
            self._value = value
            self._is_set = True
        return self._value

    async def get_or_init(self, factory: Callable[[], Awaitable[T]]) -> T:
        """Return the stored value, computing it with factory on first use.

        Raises:
            Exception: Whatever the factory raises; the cell stays empty.
        """
        if self._is_set:
            return self._value
        value = await factory()
        return self.set(value)
