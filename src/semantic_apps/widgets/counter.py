"""Counter button: a button with an attached label showing a running count.

The markup carries everything the client needs: the separator sits in
``data-separator`` on the container and the initial count in ``data-val`` on
the button. The page script binds every ``[data-counter-button]`` container
once, so no script text is generated per widget.

Example::

    counter_button("counter", "Votes", icon=icon("thumbs up"), value=1200,
                   size="big", color="purple")

renders::

    <div class="ui labeled button" tabindex="0" data-counter-button="counter" data-separator=" ">
      <button id="counter" class="big purple ui button" data-val="1200" data-input-type="action">
        <i class="thumbs up icon"></i> Votes
      </button>
      <span class="ui basic purple label" data-counter-label>1 200</span>
    </div>
"""

import logging
from typing import Any

from ..formatting import format_grouped
from ..markup import Tag, render_class
from ..models import CounterOptions
from .button import button

logger = logging.getLogger(__name__)


class CounterButton:
    """Rendered counter button.

    Keeps direct references to the three elements it is made of so callers
    never have to look them up again by position in the markup.
    """

    def __init__(self, input_id: str, options: CounterOptions):
        self.input_id = input_id
        self.options = options

        attrs = {"data_val": options.value, "data_input_type": "action", **options.attrs}
        extra_class = render_class(attrs.pop("class_", None), attrs.pop("class", None))
        self.button = button(
            input_id,
            options.label,
            options.icon,
            class_=render_class(options.size, options.color, extra_class),
            **attrs,
        )
        self.label = Tag(
            "span",
            self.display_value,
            class_=render_class("ui basic", options.color, "label"),
            data_counter_label=True,
        )
        self.container = Tag(
            "div",
            self.button,
            self.label,
            class_="ui labeled button",
            tabindex="0",
            data_counter_button=input_id,
            data_separator=options.separator,
        )

    @property
    def display_value(self) -> str:
        return format_grouped(self.options.value, self.options.separator)

    def render(self):
        return self.container.render()

    def __html__(self) -> str:
        return self.container.__html__()

    def __str__(self) -> str:
        return str(self.container)

    def __repr__(self) -> str:
        return f"CounterButton({self.input_id!r}, value={self.options.value})"


def counter_button(
    input_id: str,
    label: str = "",
    icon: Any = None,
    value: int = 0,
    color: str = "",
    size: str = "",
    separator: str = " ",
    **attrs: Any,
) -> CounterButton:
    """Create a counter button whose displayed value goes up by one per click.

    Args:
        input_id: Id of the button and key of its input binding. Must be
            unique on the page.
        label: Text on the button.
        icon: Optional icon shown before the label.
        value: Initial count, a non-negative integer.
        color: Semantic UI color keyword, applied to button and label.
        size: Semantic UI size keyword, e.g. "medium" or "big".
        separator: Digit group separator of the displayed count.
        **attrs: Extra attributes for the ``<button>`` element.

    The value reported under ``input_id`` is the number of clicks, not the
    displayed count.
    """
    options = CounterOptions(
        label=label, icon=icon, value=value, color=color, size=size, separator=separator, attrs=attrs
    )
    logger.debug(f"Rendering counter button {input_id} with value {options.value}")
    return CounterButton(input_id, options)
