"""Parameter matching and event dispatch primitives."""

from .dispatcher import EventDispatcher
from .errors import (
    ClitcError,
    CommandModeError,
    DispatchError,
    MissingInformationError,
    NoEventError,
    SchemaError,
    UnknownCommandError,
    WrongFormatError,
)
from .events import EmitEvent, Event, InfoEvent, OutputSlot, PlainEvent
from .parser import parse_tokens
from .schema import ParamDef, ParamSchema, ParsedInvocation, SubParamDef
from .splitters import QuotedSplitter, SplitError, Splitter, WhitespaceSplitter
from .values import TypedValue, ValueType, format_value

__all__ = [
    "EventDispatcher",
    "Event",
    "PlainEvent",
    "InfoEvent",
    "EmitEvent",
    "OutputSlot",
    "ParamSchema",
    "ParamDef",
    "SubParamDef",
    "ParsedInvocation",
    "TypedValue",
    "ValueType",
    "format_value",
    "parse_tokens",
    "Splitter",
    "WhitespaceSplitter",
    "QuotedSplitter",
    "SplitError",
    "ClitcError",
    "SchemaError",
    "MissingInformationError",
    "WrongFormatError",
    "DispatchError",
    "UnknownCommandError",
    "CommandModeError",
    "NoEventError",
]
