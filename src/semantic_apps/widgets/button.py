import logging
from typing import Any

from ..markup import Tag, render_class

logger = logging.getLogger(__name__)


def button(input_id: str, label: Any, icon: Any = None, class_: str | None = None, **attrs: Any) -> Tag:
    """Semantic UI button.

    Args:
        input_id: Element id, also the key of the input binding.
        label: Button content, text or markup.
        icon: Optional icon rendered before the label.
        class_: Extra classes placed before the ``ui button`` classes.
        **attrs: Further attributes for the ``<button>`` element.

    Example:
        >>> str(button("go", "Go"))
        '<button id="go" class="ui button"> Go</button>'
    """
    if attrs.pop("id", None) is not None:
        logger.warning(f"Ignoring id attribute on button {input_id}; the id is always the input id")
    return Tag("button", icon, " ", label, id=input_id, class_=render_class(class_, "ui button"), **attrs)


def action_button(input_id: str, label: Any, icon: Any = None, width: str | None = None, **attrs: Any) -> Tag:
    """Button whose input value starts at zero and goes up by one per click.

    The count is kept by the client script and reported under ``input_id``.
    """
    style = attrs.pop("style", None)
    if width is not None:
        style = f"width: {width}; {style or ''}"
    attrs.setdefault("data_input_type", "action")
    return button(input_id, label, icon, style=style, **attrs)


def update_action_button(session, input_id: str, label: str | None = None, icon: Any = None) -> None:
    """Change the label and/or icon of a rendered action button.

    Fields left as ``None`` are left out of the message, so the client keeps
    its current value. Passing ``icon=""`` removes the icon.
    """
    message = {"label": None if label is None else str(label), "icon": None if icon is None else str(icon)}
    message = {key: value for key, value in message.items() if value is not None}
    logger.debug(f"Updating action button {input_id}: {sorted(message)}")
    session.send_input_message(input_id, message)
