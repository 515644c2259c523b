"""Environment variable arguments passed alongside a script."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List

from .errors import InvalidArgumentCount


@dataclass(frozen=True)
class Arg:
    """A single environment variable to inject into the shell process."""

    key: str
    value: str

    def __str__(self) -> str:
        return self.key + "=" + self.value


def normalize_args(args: Iterable[Any]) -> List[Arg]:
    """Pair up extra arguments into environment variables.

    Items are consumed left to right. An ``Arg`` stands for itself; any
    other item is a key and takes the next item as its value. Both are
    converted with ``str()``, so ``("PORT", 8080)`` becomes ``PORT=8080``.

    Args:
        args: Mix of ``Arg`` instances and plain key/value items

    Returns:
        List of Arg in input order

    Raises:
        InvalidArgumentCount: A plain key is the last item
    """
    items = list(args)
    pairs: List[Arg] = []

    i = 0
    while i < len(items):
        item = items[i]
        if isinstance(item, Arg):
            pairs.append(item)
            i += 1
            continue

        if i == len(items) - 1:
            raise InvalidArgumentCount()
        pairs.append(Arg(str(item), str(items[i + 1])))
        i += 2

    return pairs


__all__ = ["Arg", "normalize_args"]
