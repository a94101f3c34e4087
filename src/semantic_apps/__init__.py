"""Semantic UI widgets for reactive web apps."""

from .app import App, app
from .formatting import format_grouped, increment_label, parse_grouped, separator_pattern
from .markup import Tag, TagList, br, div, icon, span, tags
from .models import CounterOptions
from .page import semantic_page
from .session import Inputs, InvalidMessageError, Session
from .widgets import (
    CounterButton,
    action_button,
    actionButton,
    button,
    counter_button,
    update_action_button,
    updateActionButton,
)

__all__ = [
    "App",
    "app",
    "Session",
    "Inputs",
    "InvalidMessageError",
    "Tag",
    "TagList",
    "tags",
    "div",
    "span",
    "br",
    "icon",
    "semantic_page",
    "button",
    "action_button",
    "actionButton",
    "update_action_button",
    "updateActionButton",
    "counter_button",
    "CounterButton",
    "CounterOptions",
    "format_grouped",
    "parse_grouped",
    "separator_pattern",
    "increment_label",
]
