from __future__ import annotations
from typing import Any, Dict, Tuple


class Message:
    """
    A failure message built the same way as str.format(), but rendered lazily
    when it is used, if it is used at all. Most expectations pass, so matchers
    hand out messages that are never read.

    Templates may reach into their arguments, e.g. "{0.__class__.__name__}",
    so even a type name is only looked up on render.
    """

    __slots__ = ("template", "args", "kwargs")

    def __init__(self, template: str, args: Tuple[Any, ...] = (), kwargs: Dict[str, Any] | None = None) -> None:
        self.template = template
        self.args = args
        self.kwargs = kwargs or {}

    def render(self) -> str:
        return self.template.format(*self.args, **self.kwargs)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        # never renders; safe to call on the success path
        return f"Message({self.template!r})"


def errorf(template: str, *args: Any, **kwargs: Any) -> Message:
    return Message(template, args, kwargs)
