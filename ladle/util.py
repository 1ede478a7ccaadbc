# --------------------------------------------------------------------
# util.py: Common utility functions.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
from typing import Any, Generator, Iterable, List, Set, TypeVar

# --------------------------------------------------------------------
T = TypeVar("T")


# --------------------------------------------------------------------
def badge(s: Any) -> str:
    return "[ %s ]" % s


# --------------------------------------------------------------------
def plural(n: int, word: str) -> str:
    return "%d %s%s" % (n, word, "" if n == 1 else "s")


# --------------------------------------------------------------------
def uniq(it: Iterable[T]) -> Generator[T, None, None]:
    """Filter the given iterable preserving order by removing
    any subsequent items already encountered."""

    visited: Set[T] = set()
    for x in it:
        if x not in visited:
            visited.add(x)
            yield x


# --------------------------------------------------------------------
def uniq_list(it: Iterable[T]) -> List[T]:
    return list(uniq(it))
