from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .errors import CommandModeError, NoEventError, UnknownCommandError
from .events import Event
from .schema import InfoMap, ParamSchema, ParamValues, ParsedInvocation
from .splitters import Splitter, WhitespaceSplitter

logger = logging.getLogger(__name__)

_DEFAULT = object()


class EventDispatcher:
    """Parses command lines against a schema and invokes the bound events."""

    def __init__(
        self,
        schema: ParamSchema,
        *,
        splitter: Splitter | None = None,
        single_command: bool = True,
        context: Any = None,
        events: Mapping[str, Event] | None = None,
    ) -> None:
        self.schema = schema
        self.schema.set_sequential_processing(True)
        self.splitter = splitter or WhitespaceSplitter()
        self.single_command = single_command
        self.context = context
        self._events: Dict[str, Event] = dict(events or {})

    @property
    def events(self) -> Mapping[str, Event]:
        return dict(self._events)

    def attach(self, name: str, event: Event) -> None:
        self._events[name] = event

    def detach(self, name: str) -> Optional[Event]:
        return self._events.pop(name, None)

    def attach_all(self, events: Mapping[str, Event]) -> None:
        """Replace every bound event."""
        self._events = dict(events)

    def detach_all(self) -> Dict[str, Event]:
        """Unbind every event and return the previous bindings."""
        previous, self._events = self._events, {}
        return previous

    def info(self) -> InfoMap:
        return self.schema.info()

    def parse(self, raw_text: str) -> ParsedInvocation:
        tokens = self.splitter(raw_text)
        return self.schema.parse_vec(tokens)

    def pass_command(self, raw_text: str, context: Any = _DEFAULT) -> None:
        """
        Parse ``raw_text`` and run the event bound to every matched command.

        Raises UnknownCommandError when nothing matched, CommandModeError when
        several commands matched in single-command mode and NoEventError for the
        first matched command without an event. Handlers that ran before a
        NoEventError are not undone.
        """
        if context is _DEFAULT:
            context = self.context

        parsed = self.parse(raw_text)
        if not parsed:
            raise UnknownCommandError(f"Could not find a known command in {raw_text!r}.")
        if len(parsed) > 1 and self.single_command:
            raise CommandModeError(list(parsed))

        for command, values in parsed.items():
            self._invoke(command, values, context)

    def _invoke(self, command: str, values: ParamValues, context: Any) -> None:
        event = self._events.get(command)
        if event is None:
            raise NoEventError(command)
        logger.debug("Dispatching %r to %r with %s", command, event, values)
        event.invoke(context, values, self.info)
