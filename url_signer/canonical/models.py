"""
Canonical URL Models
====================
Parsed URL components and the ordered query parameter container.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class ParsedUrl:
    """An absolute URL split into the parts that take part in signing."""
    scheme: str
    host: str
    port: Optional[int] = None
    path: str = ""
    fragment: Optional[str] = None


class QueryParameters:
    """
    Ordered mapping of query parameter names to string values.

    Setting an existing name replaces its value in place, so the later value
    wins while the name keeps the position of its first appearance.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()):
        self._params: Dict[str, str] = {}
        for key, value in pairs:
            self.set(key, value)

    def set(self, key: str, value) -> None:
        self._params[key] = str(value)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._params.get(key, default)

    def pop(self, key: str) -> str:
        return self._params.pop(key)

    def sorted_by_key(self) -> "QueryParameters":
        """Return a copy ordered by parameter name."""
        return QueryParameters(sorted(self._params.items()))

    def copy(self) -> "QueryParameters":
        return QueryParameters(self._params.items())

    def items(self):
        return self._params.items()

    def __contains__(self, key) -> bool:
        return key in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other) -> bool:
        if not isinstance(other, QueryParameters):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __repr__(self) -> str:
        return f"QueryParameters({list(self._params.items())!r})"
