"""First-match route lookup over a pre-sorted route table.

The table is scanned in order. Static paths compare by string equality;
dynamic paths are compiled to anchored regular expressions:

- ``:name`` matches exactly one non-empty path segment
- ``*`` matches any remaining suffix, slashes included

Because ``build_routes()`` sorts static routes first, ``/users/list``
wins over ``/users/:id`` without any extra bookkeeping.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from kitro.routing.route import ApiRoute, RouteMatch, RouteRecord, is_dynamic_path

# :name up to the next slash, or the * catch-all
_MARKER_RE = re.compile(r":([^/]+)|\*")

CATCH_ALL_PARAM = "*"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A route path compiled for matching.

    ``names`` lists the marker names in the order of the regex groups.
    """

    regex: re.Pattern[str]
    names: tuple[str, ...]

    def fullmatch(self, path: str) -> dict[str, str] | None:
        """Return captured params if *path* matches, else ``None``."""
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        return dict(zip(self.names, m.groups(), strict=True))


@lru_cache(maxsize=1024)
def compile_pattern(path: str) -> CompiledPattern:
    """Compile a route path into a :class:`CompiledPattern`.

    Examples::

        "/users/:id"  -> ^/users/([^/]+)$   names=("id",)
        "/docs/*"     -> ^/docs/(.*)$       names=("*",)
    """
    parts: list[str] = []
    names: list[str] = []
    pos = 0
    for marker in _MARKER_RE.finditer(path):
        parts.append(re.escape(path[pos : marker.start()]))
        if marker.group(1) is None:
            parts.append("(.*)")
            names.append(CATCH_ALL_PARAM)
        else:
            parts.append("([^/]+)")
            names.append(marker.group(1))
        pos = marker.end()
    parts.append(re.escape(path[pos:]))
    return CompiledPattern(regex=re.compile("".join(parts)), names=tuple(names))


def resolve[R: (RouteRecord, ApiRoute)](
    routes: Sequence[R], path: str
) -> RouteMatch | None:
    """Find the first route matching *path*, with its captured params.

    Returns ``None`` when nothing matches; callers render that as a 404.
    """
    for route in routes:
        if not is_dynamic_path(route.path):
            if route.path == path:
                return RouteMatch(route=route, params={})
            continue
        params = compile_pattern(route.path).fullmatch(path)
        if params is not None:
            return RouteMatch(route=route, params=params)
    return None


def match[R: (RouteRecord, ApiRoute)](routes: Sequence[R], path: str) -> R | None:
    """Return the first route matching *path*, or ``None``."""
    result = resolve(routes, path)
    if result is None:
        return None
    return result.route  # type: ignore[return-value]
