"""Minimal HTML markup builder used by the widgets.

Tags are plain Python objects holding a name, attributes and children.
They render to HTML through ``__html__`` so they can be dropped into Jinja2
templates or combined with ``markupsafe.Markup`` directly.
"""

from typing import Any

from markupsafe import Markup, escape

__all__ = [
    "Tag",
    "TagList",
    "tags",
    "div",
    "span",
    "i",
    "br",
    "button_tag",
    "script",
    "icon",
    "render_class",
]

VOID_ELEMENTS = frozenset(
    ["area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"]
)


def _attr_name(name: str) -> str:
    # class_ -> class, data_val -> data-val
    return name.rstrip("_").replace("_", "-")


def render_class(*values: Any) -> str:
    """Render a class attribute value.

    Strings pass through, lists and tuples are flattened and dict keys are
    kept when their value is truthy. Empty values are skipped.

    Example:
        >>> render_class("big", "", "ui button")
        'big ui button'
        >>> render_class(["a", ["b"]], {"c": True, "d": False})
        'a b c'
    """
    classes = []
    queue = list(values)

    while queue:
        value = queue.pop(0)
        if not value:
            continue
        if isinstance(value, str):
            classes.extend(value.split())
        elif isinstance(value, dict):
            classes.extend(k for k, v in value.items() if v)
        elif isinstance(value, (list, tuple)):
            queue[0:0] = list(value)

    return " ".join(classes)


def _render_attrs(attrs: dict[str, Any]) -> str:
    parts = []
    for name, value in attrs.items():
        if value is True:
            parts.append(f" {name}")
        elif value is False or value is None:
            continue
        else:
            parts.append(f' {name}="{escape(value)}"')
    return "".join(parts)


def _flatten(children) -> list:
    flat = []
    for child in children:
        if child is None or (isinstance(child, str) and child == ""):
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(_flatten(child))
        else:
            flat.append(child)
    return flat


def _render_child(child: Any) -> str:
    if hasattr(child, "__html__"):
        return child.__html__()
    return str(escape(child))


class TagList:
    """A fragment of sibling nodes without a wrapping element."""

    def __init__(self, *children: Any):
        self.children = _flatten(children)

    def append(self, *children: Any) -> None:
        self.children.extend(_flatten(children))

    def render(self) -> Markup:
        return Markup("".join(_render_child(child) for child in self.children))

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"TagList({self.children!r})"


class Tag:
    """An HTML element.

    Keyword arguments become attributes, positional arguments become children.
    A dict passed as a positional argument is merged into the attributes, which
    allows names that are not valid Python identifiers.

    Example:
        >>> str(Tag("button", "Go", id="go", class_="ui button", data_val=3))
        '<button id="go" class="ui button" data-val="3">Go</button>'
    """

    def __init__(self, _name: str, *children: Any, **attrs: Any):
        self.name = _name
        self.attrs: dict[str, Any] = {}
        self.children: list = []
        for child in children:
            if isinstance(child, dict):
                self.attrs.update(child)
            else:
                self.children.extend(_flatten([child]))
        for key, value in attrs.items():
            self.attrs[_attr_name(key)] = value

    def append(self, *children: Any) -> "Tag":
        self.children.extend(_flatten(children))
        return self

    def add_class(self, *classes: Any) -> "Tag":
        self.attrs["class"] = render_class(self.attrs.get("class"), *classes)
        return self

    def get_attr(self, name: str, default: Any = None) -> Any:
        return self.attrs.get(name, default)

    @property
    def classes(self) -> list[str]:
        return render_class(self.attrs.get("class")).split()

    def render(self) -> Markup:
        opening = f"<{self.name}{_render_attrs(self.attrs)}>"
        if self.name in VOID_ELEMENTS:
            return Markup(opening)
        inner = "".join(_render_child(child) for child in self.children)
        return Markup(f"{opening}{inner}</{self.name}>")

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"<Tag {self.name} {self.attrs!r}>"


class _TagFactory:
    """Attribute access builds tags: ``tags.div(...)``, ``tags.section(...)``."""

    def __getattr__(self, name: str):
        if name.startswith("__"):
            raise AttributeError(name)
        tag_name = name.rstrip("_")

        def builder(*children: Any, **attrs: Any) -> Tag:
            return Tag(tag_name, *children, **attrs)

        builder.__name__ = tag_name
        return builder


tags = _TagFactory()


def div(*children: Any, **attrs: Any) -> Tag:
    return Tag("div", *children, **attrs)


def span(*children: Any, **attrs: Any) -> Tag:
    return Tag("span", *children, **attrs)


def i(*children: Any, **attrs: Any) -> Tag:
    return Tag("i", *children, **attrs)


def br(**attrs: Any) -> Tag:
    return Tag("br", **attrs)


def button_tag(*children: Any, **attrs: Any) -> Tag:
    return Tag("button", *children, **attrs)


def script(source: str = "", **attrs: Any) -> Tag:
    """Script element. The source is inserted verbatim, never escaped."""
    return Tag("script", Markup(source) if source else None, **attrs)


def icon(name: str, class_: str | None = None, **attrs: Any) -> Tag:
    """Semantic UI icon, e.g. ``icon("calendar")`` -> ``<i class="calendar icon"></i>``."""
    return Tag("i", class_=render_class(name, class_, "icon"), **attrs)
