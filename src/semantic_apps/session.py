"""Per-client session: the reactive input store and the outbound queue."""

import json
import logging
from queue import Queue
from typing import Any, Callable

import traitlets
from pydantic import ValidationError

from .models import InputMessage, InputValueMessage

logger = logging.getLogger(__name__)

_MISSING = object()


class InvalidMessageError(Exception):
    pass


class Inputs(traitlets.HasTraits):
    """Input values reported by the page, keyed by input id.

    All values live in the single ``values`` trait, so any string is a valid
    input id. Per-input observers are registered with ``observe_input``.
    """

    values = traitlets.Dict()

    def set_value(self, input_id: str, value: Any) -> None:
        self.values = {**self.values, input_id: value}

    def observe_input(self, input_id: str, handler: Callable[[Any], None]) -> None:
        """Call ``handler(new_value)`` every time ``input_id`` changes."""

        def on_change(change):
            old = change.old.get(input_id, _MISSING) if isinstance(change.old, dict) else _MISSING
            new = change.new.get(input_id, _MISSING)
            if new is not _MISSING and new != old:
                handler(new)

        self.observe(on_change, names=["values"])

    def names(self) -> list[str]:
        return sorted(self.values)

    def get(self, input_id: str, default: Any = None) -> Any:
        return self.values.get(input_id, default)

    def __getitem__(self, input_id: str) -> Any:
        return self.values[input_id]

    def __contains__(self, input_id: str) -> bool:
        return input_id in self.values


class OutboundQueue:
    """Messages waiting to be sent to the page."""

    def __init__(self):
        self.queue = Queue()

    def send(self, message: dict) -> None:
        self.queue.put(message)

    def empty(self) -> bool:
        return self.queue.empty()

    def receive_nowait(self) -> dict:
        return self.queue.get_nowait()

    def drain(self) -> list[dict]:
        """Remove and return everything currently queued."""
        messages = []
        while not self.queue.empty():
            messages.append(self.queue.get_nowait())
        return messages


class Session:
    def __init__(self, session_id: str):
        self.session_id = session_id
        self.input = Inputs()
        self.channel = OutboundQueue()

    def observe_input(self, input_id: str, handler: Callable[[Any], None]) -> None:
        self.input.observe_input(input_id, handler)

    def send_input_message(self, input_id: str, message: dict[str, Any]) -> None:
        """Queue a one-shot message for the client binding of ``input_id``."""
        outgoing = InputMessage(input_id=input_id, message=message)
        logger.debug(f"[Session {self.session_id}] Queueing input message for {input_id}: {message}")
        self.channel.send(outgoing.model_dump())

    def handle_message(self, raw: str | dict) -> InputValueMessage:
        """Validate a message from the page and apply it to the input store."""
        try:
            data = json.loads(raw) if isinstance(raw, str) else raw
            message = InputValueMessage.model_validate(data)
        except (ValueError, ValidationError) as e:
            logger.warning(f"[Session {self.session_id}] Rejected client message: {e}")
            raise InvalidMessageError(str(e)) from e

        logger.debug(f"[Session {self.session_id}] Input {message.input_id} = {message.value}")
        self.input.set_value(message.input_id, message.value)
        return message
