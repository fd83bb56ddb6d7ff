# topmark:header:start
#
#   project      : PwText
#   file         : cli_types.py
#   file_relpath : src/pwtext/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2026 PwText authors
#
# topmark:header:end

"""Custom Click parameter types for the PwText CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar

import click

from pwtext.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=KeyedStrEnum)


class KeyedChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that parses a token into a `KeyedStrEnum` member.

    Accepts the member key, its name or any alias (see `KeyedStrEnum.parse`).
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = list(self.enum_cls.keys())

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a command-line token to an enum member."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member = self.enum_cls.parse(value)
        if member is None:
            self._fail_noreturn(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_PWTEXT_COMPLETE=bash_source pwtext)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [RuntimeCompletionItem(key) for key in self.choices if key.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"KeyedChoiceParam({self.enum_cls.__name__})"
