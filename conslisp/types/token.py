from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    INTEGER = "Integer"
    IDENTIFIER = "Identifier"
    SYNTAX = "Syntax"


@dataclass(frozen=True)
class Token:
    value: str
    kind: TokenKind
