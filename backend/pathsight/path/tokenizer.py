"""Path-data tokenizer — raw ``d`` string → ordered (command, argument groups) tokens.

Best effort: scanning stops at the first position it cannot make sense of and
the tokens read so far are returned together with the unconsumed remainder.
Malformed input never raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pathsight.path.commands import ARG_SHAPES, ArgGroup, Token, lookup_command
from pathsight.path.scan import scan_group

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenizeResult:
    tokens: tuple[Token, ...] = field(default_factory=tuple)
    # Unconsumed, left-trimmed suffix of the input ("" when everything was read)
    remainder: str = ""
    # Index of ``remainder`` in the original string
    offset: int = 0

    @property
    def complete(self) -> bool:
        return not self.remainder


def _scan_token(text: str) -> tuple[Token, str] | None:
    """Scan one command letter plus all of its repeated argument groups."""
    found = lookup_command(text[:1])
    if found is None:
        return None
    command, relative = found
    rest = text[1:]

    shape = ARG_SHAPES[command]
    if shape is None:
        return Token(command=command, relative=relative), rest

    groups: list[ArgGroup] = []
    while True:
        scanned = scan_group(shape, rest)
        if scanned is None:
            break
        group, rest = scanned
        groups.append(group)

    if not groups:
        return None
    return Token(command=command, relative=relative, groups=tuple(groups)), rest


def tokenize(d: str) -> TokenizeResult:
    """Tokenize path data.

    Commas are treated exactly like whitespace. The substitution keeps string
    length, so ``offset`` indexes into the caller's ``d``.
    """
    text = d.replace(",", " ")
    tokens: list[Token] = []
    rest = text.lstrip()

    while rest:
        scanned = _scan_token(rest)
        if scanned is None:
            break
        token, rest = scanned
        tokens.append(token)
        rest = rest.lstrip()

    offset = len(text) - len(rest)
    remainder = d[offset:]
    if remainder:
        logger.warning(
            "Path data truncated at offset %d after %d tokens: %.40r",
            offset,
            len(tokens),
            remainder,
        )
    else:
        logger.debug("Tokenized %d commands from %d chars", len(tokens), len(d))

    return TokenizeResult(tokens=tuple(tokens), remainder=remainder, offset=offset)
