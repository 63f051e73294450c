from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List


class SplitError(ValueError):
    """Raised when a command line cannot be split into tokens."""


class Splitter(ABC):
    """Strategy that turns a raw command line into tokens."""

    def __call__(self, text: str) -> List[str]:
        return self.split(text)

    @abstractmethod
    def split(self, text: str) -> List[str]:
        """Return the tokens of ``text``."""


class WhitespaceSplitter(Splitter):
    def split(self, text: str) -> List[str]:
        return text.split()


class QuotedSplitter(Splitter):
    """Whitespace splitter that keeps quoted runs together."""

    def split(self, text: str) -> List[str]:
        tokens: List[str] = []
        current: List[str] = []
        quote: str | None = None
        escaped = False
        # a quoted empty string still yields a token
        pending = False

        for ch in text:
            if quote:
                if escaped:
                    current.append(ch)
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == quote:
                    quote = None
                else:
                    current.append(ch)
                continue

            if ch in ("'", '"'):
                quote = ch
                pending = True
                continue

            if ch.isspace():
                if current or pending:
                    tokens.append("".join(current))
                    current = []
                    pending = False
                continue

            current.append(ch)

        if quote:
            raise SplitError("Unterminated quote in command.")

        if current or pending:
            tokens.append("".join(current))

        return tokens
