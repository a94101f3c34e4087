from .button import action_button, button, update_action_button
from .counter import CounterButton, counter_button

# Aliases with the host framework's camelCase names
actionButton = action_button
updateActionButton = update_action_button

__all__ = [
    "button",
    "action_button",
    "actionButton",
    "update_action_button",
    "updateActionButton",
    "counter_button",
    "CounterButton",
]
