from __future__ import annotations

from typing import Any, Dict, List

from .engine.schema import ParamValues, ParsedInvocation
from .engine.values import format_value, type_name


def visualize(invocation: ParsedInvocation) -> str:
    """
    Produce a human-readable tree representation of a parsed invocation.
    """
    lines: List[str] = []
    for command, values in invocation.items():
        _render(command, values, lines)
    return "\n".join(lines)


def _render(command: str, values: ParamValues, lines: List[str]) -> None:
    lines.append(command)
    for key, value in values.items():
        lines.append(f"  {_describe_value(key, value)}")


def _describe_value(key: str, value: Any) -> str:
    return f"{key} = {format_value(value)} ({type_name(value)})"


def to_jsonable(invocation: ParsedInvocation) -> Dict[str, Dict[str, Any]]:
    return {
        command: {key: list(value) if isinstance(value, list) else value for key, value in values.items()}
        for command, values in invocation.items()
    }
