"""API handler invocation.

An API module under ``pages/api/`` defines ``handler(context)``. The
handler may be sync or async and returns a JSON-serializable value or
``None``.
"""

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ApiContext:
    """What an API handler receives.

    Attributes:
        request: The transport's request object, passed through untouched.
        params: Captured route params (``:name`` markers, ``*`` catch-all).
    """

    request: Any = None
    params: Mapping[str, str] = field(default_factory=dict)


async def call_api(handler: Callable[..., Any], context: Any) -> Any:
    """Call *handler* with *context*, awaiting the result if needed.

    Exceptions propagate; the request layer turns them into 500s.
    """
    result = handler(context)
    if inspect.isawaitable(result):
        result = await result
    return result
