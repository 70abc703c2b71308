"""Resolver registry — every command kind is resolved by a function registered via decorator.

Usage:
    @resolver(Command.LINE)
    def _line(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
        ...

The interpreter looks resolvers up here; a command with no resolver is a
grammar mismatch between tokenizer and interpreter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from pathsight.path.commands import Command
from pathsight.path.errors import GrammarMismatchError

if TYPE_CHECKING:
    from pathsight.path.commands import Token
    from pathsight.path.interpreter import InterpreterOptions, PathState

logger = logging.getLogger(__name__)

ResolverFn = Callable[["PathState", "Token", "InterpreterOptions"], "PathState"]


@dataclass
class ResolverSpec:
    command: Command
    fn: ResolverFn
    description: str = ""


class ResolverRegistry:
    """Registry of command resolvers, one per command kind."""

    def __init__(self) -> None:
        self._resolvers: dict[Command, ResolverSpec] = {}

    def register(self, spec: ResolverSpec) -> None:
        if spec.command in self._resolvers:
            raise ValueError(f"Duplicate resolver for command: {spec.command.value}")
        self._resolvers[spec.command] = spec
        logger.debug("Registered resolver for %s (%s)", spec.command.value, spec.fn.__name__)

    def get(self, command: Command) -> ResolverSpec:
        try:
            return self._resolvers[command]
        except KeyError:
            raise GrammarMismatchError(f"No resolver registered for command {command.value!r}") from None

    def missing(self) -> set[Command]:
        """Command kinds the tokenizer can produce but nothing resolves."""
        return set(Command) - set(self._resolvers)

    @property
    def count(self) -> int:
        return len(self._resolvers)


# Module-level singleton
_registry = ResolverRegistry()


def get_registry() -> ResolverRegistry:
    return _registry


def resolver(command: Command, *, description: str = ""):
    """Decorator to register a command resolver."""

    def decorator(fn: ResolverFn):
        _registry.register(ResolverSpec(command=command, fn=fn, description=description or (fn.__doc__ or "").strip()))
        return fn

    return decorator
