"""Declarative command-line parameters with typed parsing and event dispatch."""

from .engine import (
    ClitcError,
    CommandModeError,
    DispatchError,
    EmitEvent,
    Event,
    EventDispatcher,
    InfoEvent,
    MissingInformationError,
    NoEventError,
    OutputSlot,
    ParamDef,
    ParamSchema,
    ParsedInvocation,
    PlainEvent,
    QuotedSplitter,
    SchemaError,
    SplitError,
    Splitter,
    SubParamDef,
    TypedValue,
    UnknownCommandError,
    ValueType,
    WhitespaceSplitter,
    WrongFormatError,
    format_value,
    parse_tokens,
)
from .visualize import to_jsonable, visualize

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
    "visualize",
    "to_jsonable",
]
