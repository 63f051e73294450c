from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .schema import ParamDef, ParamSchema, ParamValues, ParsedInvocation

logger = logging.getLogger(__name__)

Location = Tuple[int, "ParamDef"]


def parse_tokens(schema: "ParamSchema", tokens: Sequence[str]) -> "ParsedInvocation":
    """
    Match ``tokens`` against ``schema`` and return the typed values per command.

    The schema's ``sequential`` flag selects the strategy. The caller's sequence
    is never modified.
    """
    buffer = list(tokens)
    result: "ParsedInvocation" = {}
    if schema.sequential:
        _process_sequentially(schema, buffer, result)
    else:
        locations = find_locations(schema, buffer)
        _process_locations(locations, buffer, result)
    return result


def find_locations(schema: "ParamSchema", tokens: Sequence[str]) -> List[Location]:
    locations: List[Location] = []
    for index, token in enumerate(tokens):
        param = schema.find(token)
        if param is not None:
            locations.append((index, param))
    locations.sort(key=lambda location: location[0])
    return locations


def _process_locations(
    locations: List[Location],
    buffer: List[str],
    result: "ParsedInvocation",
) -> None:
    if not locations:
        return

    indices = [index for index, _ in locations]
    # drain widths are relative to the previous match, so order is load-bearing
    assert all(a < b for a, b in zip(indices, indices[1:])), "locations must be strictly ascending"

    leading = indices[0]
    if leading:
        logger.debug("Discarding unmatched leading tokens: %s", buffer[:leading])
        del buffer[:leading]

    for position, (index, param) in enumerate(locations):
        if position + 1 < len(locations):
            width = locations[position + 1][0] - index
        else:
            width = len(buffer)
        buffer.pop(0)
        window = buffer[: width - 1]
        del buffer[: width - 1]
        _store(result, param, param.match_with(window))


def _process_sequentially(
    schema: "ParamSchema",
    buffer: List[str],
    result: "ParsedInvocation",
) -> None:
    while buffer:
        found = _find_first(schema, buffer)
        if found is None:
            logger.debug("No further commands in tokens: %s", buffer)
            break
        index, param = found
        if index:
            logger.debug("Discarding unmatched tokens before %r: %s", param.name, buffer[:index])
        del buffer[: index + 1]
        _store(result, param, param.match_with(buffer))


def _find_first(schema: "ParamSchema", buffer: Sequence[str]) -> Optional[Location]:
    for index, token in enumerate(buffer):
        param = schema.find(token)
        if param is not None:
            return index, param
    return None


def _store(result: "ParsedInvocation", param: "ParamDef", values: "ParamValues") -> None:
    if param.name in result:
        logger.debug("Command %r matched again; replacing %s", param.name, result[param.name])
    result[param.name] = values
