from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import IO, Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from .errors import MissingInformationError, WrongFormatError
from .values import TypedValue, ValueType, coerce

ParamValues = Dict[str, TypedValue]
ParsedInvocation = Dict[str, ParamValues]
InfoMap = Dict[str, List[str]]


def _optional_str(raw: Mapping[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    return value if isinstance(value, str) else None


def _as_mapping(raw: Any) -> Mapping[str, Any]:
    return raw if isinstance(raw, Mapping) else {}


@dataclass(frozen=True)
class SubParamDef:
    """One positional, typed argument slot of a parameter."""

    ord: int
    type: ValueType
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Any) -> "SubParamDef":
        raw = _as_mapping(raw)
        ord_value = raw.get("ord")
        if isinstance(ord_value, bool) or not isinstance(ord_value, int) or ord_value < 0:
            raise MissingInformationError("Sub-parameter is missing a non-negative 'ord'.")
        tag = raw.get("type")
        if not isinstance(tag, str):
            raise MissingInformationError(f"Sub-parameter {ord_value} is missing its 'type'.")
        return cls(ord=ord_value, type=ValueType.from_tag(tag), name=_optional_str(raw, "name"))

    @property
    def key(self) -> str:
        return self.name if self.name is not None else str(self.ord)

    def match_with(self, tokens: List[str]) -> Optional[Tuple[str, TypedValue]]:
        value = coerce(self.type, tokens)
        if value is None:
            return None
        return self.key, value


@dataclass(frozen=True)
class ParamDef:
    """A command or option together with its ordered sub-parameters."""

    name: str
    short: Optional[str] = None
    descr: Optional[str] = None
    params: Tuple[SubParamDef, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.params, key=lambda sub: sub.ord))
        seen = set()
        for sub in ordered:
            if sub.ord in seen:
                raise WrongFormatError(f"Ord {sub.ord} not unique in param '{self.name}'.")
            seen.add(sub.ord)
        for sub in ordered[:-1]:
            if sub.type is ValueType.ARRAY:
                raise WrongFormatError(
                    f"Array sub-parameter '{sub.key}' of '{self.name}' must be declared last."
                )
        object.__setattr__(self, "params", ordered)

    @classmethod
    def from_dict(cls, raw: Any) -> "ParamDef":
        raw = _as_mapping(raw)
        name = raw.get("name")
        if not isinstance(name, str):
            raise MissingInformationError("Param entry is missing its 'name'.")
        raw_params = raw.get("params")
        params: List[SubParamDef] = []
        if isinstance(raw_params, list):
            params = [SubParamDef.from_dict(item) for item in raw_params]
        return cls(
            name=name,
            short=_optional_str(raw, "short"),
            descr=_optional_str(raw, "descr"),
            params=tuple(params),
        )

    def matches(self, token: str) -> bool:
        return (self.short is not None and self.short == token) or self.name == token

    def match_with(self, tokens: List[str]) -> ParamValues:
        """Consume tokens into typed values, skipping keys that fail to convert."""
        values: ParamValues = {}
        for sub in self.params:
            if not tokens:
                break
            result = sub.match_with(tokens)
            if result is not None:
                key, value = result
                values[key] = value
        return values

    def info(self) -> List[str]:
        title = self.name
        if self.short is not None:
            title = f"{title}/ {self.short}"
        lines = [f"\t{title}\t{self.descr or ''}"]
        for sub in self.params:
            lines.append(f"\t\t{sub.key}:\t{sub.type.info()}")
        return lines


class ParamSchema:
    """Ordered collection of parameter definitions plus the matching mode."""

    def __init__(self, params: Sequence[ParamDef], *, sequential: bool = False) -> None:
        self._params: Tuple[ParamDef, ...] = tuple(params)
        self._sequential = sequential

    @classmethod
    def from_dict(cls, raw: Any) -> "ParamSchema":
        options = raw.get("options") if isinstance(raw, Mapping) else None
        if not isinstance(options, list):
            raise WrongFormatError("'options' root not found.")
        return cls([ParamDef.from_dict(entry) for entry in options])

    @classmethod
    def from_json(cls, data: str) -> "ParamSchema":
        try:
            raw = json.loads(data)
        except json.JSONDecodeError as exc:
            raise WrongFormatError(f"Invalid schema JSON: {exc}") from exc
        return cls.from_dict(raw)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ParamSchema":
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise WrongFormatError(f"Schema is not valid UTF-8: {exc}") from exc
        return cls.from_json(text)

    @classmethod
    def from_reader(cls, reader: IO[str]) -> "ParamSchema":
        return cls.from_json(reader.read())

    @classmethod
    def from_path(cls, path: str | Path) -> "ParamSchema":
        return cls.from_bytes(Path(path).read_bytes())

    @property
    def sequential(self) -> bool:
        return self._sequential

    def set_sequential_processing(self, sequential: bool) -> None:
        self._sequential = sequential

    @property
    def params(self) -> Tuple[ParamDef, ...]:
        return self._params

    def __iter__(self) -> Iterator[ParamDef]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def get(self, name: str) -> Optional[ParamDef]:
        for param in self._params:
            if param.name == name:
                return param
        return None

    def find(self, token: str) -> Optional[ParamDef]:
        """Return the first parameter whose alias or name equals ``token``."""
        for param in self._params:
            if param.matches(token):
                return param
        return None

    def info(self) -> InfoMap:
        return {param.name: param.info() for param in self._params}

    def parse_vec(self, tokens: Sequence[str]) -> ParsedInvocation:
        from .parser import parse_tokens

        return parse_tokens(self, tokens)

    def parse_str(self, data: str, split: Callable[[str], List[str]]) -> ParsedInvocation:
        return self.parse_vec(split(data))

    def parse_str_whitespace(self, data: str) -> ParsedInvocation:
        return self.parse_vec(data.split())
