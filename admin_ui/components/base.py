"""Component base classes and markup helpers.

A component renders into a :class:`ViewContext` and returns
``markupsafe.Markup``. Anything implementing :class:`Renderable` can be
nested as content inside another component's cells.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Union, runtime_checkable

from markupsafe import Markup, escape
from fastapi.datastructures import URL


@runtime_checkable
class Renderable(Protocol):
    def render_in(self, context: "ViewContext") -> Markup: ...


@dataclass(frozen=True)
class ViewContext:
    """Request-scoped state shared by every component rendered for one page."""

    url: str = "/"

    @classmethod
    def from_request(cls, request) -> "ViewContext":
        return cls(url=str(request.url))

    def page_url(self, number: int) -> str:
        url = URL(self.url).include_query_params(page=number)
        # Links stay relative to the current host.
        path = url.path
        if url.query:
            path = f"{path}?{url.query}"
        return path


@dataclass(frozen=True)
class LiteralContent:
    value: Any

    def render(self, context: ViewContext) -> Markup:
        if self.value is None:
            return Markup("")
        return escape(self.value)


@dataclass(frozen=True)
class RenderableContent:
    component: Renderable

    def render(self, context: ViewContext) -> Markup:
        return Markup(self.component.render_in(context))


CellContent = Union[LiteralContent, RenderableContent]


def to_content(value: Any) -> CellContent:
    if isinstance(value, (LiteralContent, RenderableContent)):
        return value
    if isinstance(value, Renderable):
        return RenderableContent(value)
    return LiteralContent(value)


def render_attributes(attrs: Mapping[str, Any]) -> Markup:
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(Markup(" {}").format(name))
        else:
            value = str(value)
            if name == "class":
                # Class lists may be written across several lines
                value = " ".join(value.split())
            parts.append(Markup(' {}="{}"').format(name, value))
    return Markup("").join(parts)


def content_tag(tag: str, content: Any = None, attrs: Mapping[str, Any] | None = None) -> Markup:
    """Wrap ``content`` in ``<tag ...>``; plain strings are escaped, Markup is not."""
    inner = Markup("") if content is None else escape(content)
    return Markup("<{}{}>{}</{}>").format(tag, render_attributes(attrs or {}), inner, tag)


class BaseComponent:
    """Base for every UI component.

    Subclasses implement :meth:`call`. :meth:`render_in` binds the view
    context first, so ``call`` can pass it on to nested components.
    """

    _view_context: ViewContext | None = None

    def render_in(self, context: ViewContext) -> Markup:
        self._view_context = context
        return Markup(self.call())

    @property
    def view_context(self) -> ViewContext:
        if self._view_context is None:
            raise RuntimeError(f"{type(self).__name__} is not being rendered in a view context")
        return self._view_context

    def call(self) -> Markup:
        raise NotImplementedError
