"""Copy helpers for value objects that hold container fields.

Value objects never keep a reference to caller-supplied containers. These
helpers produce private copies in the read-only shapes the value objects
expose: mappings become a ``FrozenDict`` built from a fresh copy, lists
become tuples, and tables become tuples of tuples.
"""

from typing import Any, Iterable, Mapping, NoReturn, Optional, Tuple


class FrozenDict(dict):
    """A dict that rejects mutation after construction.

    Being a real dict, it compares equal to plain dicts and survives
    ``copy.deepcopy``, ``pickle`` and ``dataclasses.asdict``.
    """

    def _readonly(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = _readonly
    __delitem__ = _readonly
    __ior__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __reduce__(self):
        return (type(self), (dict(self),))

    def __hash__(self) -> int:
        return hash(frozenset(self.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"


def frozen_mapping(source: Optional[Mapping[str, str]]) -> FrozenDict:
    """Return a read-only private copy of ``source``."""
    return FrozenDict(dict(source or {}))


def frozen_sequence(source: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Return a private tuple copy of ``source``."""
    return tuple(list(source or ()))


def frozen_table(source: Optional[Iterable[Iterable[str]]]) -> Tuple[Tuple[str, ...], ...]:
    """Return a row-by-row copy of ``source`` as a tuple of tuples."""
    return tuple(tuple(list(row)) for row in (source or ()))


def thawed_table(source: Iterable[Iterable[str]]) -> list:
    """Return a mutable list-of-lists copy of ``source``."""
    return [list(row) for row in source]
