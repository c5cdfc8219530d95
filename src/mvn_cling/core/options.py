"""Table-driven command-line parser.

Turns the declarative grammar in :mod:`mvn_cling.core.option_table` into
an :class:`argparse.ArgumentParser` and converts its namespace into an
immutable :class:`~mvn_cling.core.models.OptionSet`.

Public API
----------
* :func:`parse_options` — parse one argument vector or raise
  :class:`~mvn_cling.exceptions.ParseError`.
* :func:`render_usage` — deterministic help text for the same grammar.
* :func:`deprecated_options_used` — names of deprecated flags present.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Any, NoReturn

from mvn_cling.core.models import OptionSet
from mvn_cling.core.option_table import GOALS, OPTIONS, Arity, OptionSpec
from mvn_cling.exceptions import ParseError

DEFAULT_COMMAND_NAME: str = "mvn"

_HELP_WIDTH: int = 100
_HELP_POSITION: int = 44
_BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}


# ---------------------------------------------------------------------------
# argparse plumbing
# ---------------------------------------------------------------------------

class _RaisingArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises :class:`ParseError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ParseError(message)


def _fixed_width_formatter(prog: str) -> argparse.HelpFormatter:
    return argparse.HelpFormatter(prog, max_help_position=_HELP_POSITION, width=_HELP_WIDTH)


def _converter(convert: Callable[[str], object]) -> Callable[[str], object]:
    """Wrap *convert* so its ``ValueError`` message reaches the user verbatim."""

    def _convert(value: str) -> object:
        try:
            return convert(value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    _convert.__name__ = getattr(convert, "__name__", "value")
    return _convert


def _boolean(value: str) -> bool:
    try:
        return _BOOLEAN_LITERALS[value.lower()]
    except KeyError:
        raise ValueError(f"invalid boolean {value!r}: expected 'true' or 'false'") from None


def _split_items(value: str) -> list[str]:
    return [item for item in value.split(",") if item]


def _restricted(spec: OptionSpec) -> Callable[[str], object]:
    """Check *spec*'s choices before applying its converter."""
    choices = spec.choices or ()

    def _convert(value: str) -> object:
        if value not in choices:
            raise ValueError(f"invalid choice: {value!r} (choose from {', '.join(choices)})")
        return spec.convert(value)

    return _convert


def _add_option(parser: argparse.ArgumentParser, spec: OptionSpec) -> None:
    help_text = f"{spec.description} (deprecated)" if spec.deprecated else spec.description
    kwargs: dict[str, Any] = {"dest": spec.dest, "help": help_text}

    if spec.arity is Arity.FLAG:
        kwargs.update(action="store_true", default=False)
    elif spec.arity is Arity.OPTIONAL_BOOL:
        kwargs.update(
            nargs="?", const=True, default=spec.default,
            type=_converter(_boolean), metavar=spec.label,
        )
    elif spec.arity is Arity.VALUE:
        convert = _restricted(spec) if spec.choices else spec.convert
        kwargs.update(default=spec.default, type=_converter(convert), metavar=spec.label)
    elif spec.arity is Arity.REPEATABLE:
        kwargs.update(action="append", default=None, type=_converter(spec.convert), metavar=spec.label)
    else:
        kwargs.update(action="extend", default=None, type=_split_items, metavar=spec.label)

    parser.add_argument(*spec.names, **kwargs)


def build_parser(command_name: str = DEFAULT_COMMAND_NAME) -> argparse.ArgumentParser:
    """Construct the argument parser for *command_name* from the option table."""
    parser = _RaisingArgumentParser(
        prog=command_name,
        description="Build tool command line.",
        add_help=False,
        allow_abbrev=False,
        formatter_class=_fixed_width_formatter,
    )
    parser.add_argument(GOALS.dest, nargs="*", metavar=GOALS.label, help=GOALS.description)
    for spec in OPTIONS:
        _add_option(parser, spec)
    return parser


END_OF_OPTIONS: str = "--"


def _split_end_of_options(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *args* at the first ``--``; the marker itself is dropped."""
    tokens = list(args)
    if END_OF_OPTIONS not in tokens:
        return tokens, []
    index = tokens.index(END_OF_OPTIONS)
    return tokens[:index], tokens[index + 1:]


def _reject_abbreviations(args: Sequence[str]) -> None:
    """Refuse single-dash tokens that only abbreviate a longer option name.

    ``-sa`` could mean ``-s a`` or a prefix of ``-sadp``; it is rejected
    rather than guessed, whatever the interpreter's argparse would do.
    """
    names = [
        name
        for spec in OPTIONS
        for name in spec.names
        if not name.startswith("--")
    ]
    for token in args:
        if len(token) < 2 or not token.startswith("-") or token.startswith("--") or "=" in token:
            continue
        if token in names:
            continue
        candidates = [name for name in names if name.startswith(token)]
        if candidates:
            raise ParseError(
                f"ambiguous option: {token} could match {', '.join(candidates)}",
            )


def _attach_optional_booleans(args: Sequence[str]) -> list[str]:
    """Rewrite ``0..1`` boolean options into ``--name=value`` tokens.

    A following ``true``/``false`` token is folded into the option; any
    other following token is left in place so it is not mistaken for
    the option's value.
    """
    names = {
        name
        for spec in OPTIONS
        if spec.arity is Arity.OPTIONAL_BOOL
        for name in spec.names
    }
    result: list[str] = []
    index = 0
    while index < len(args):
        token = args[index]
        if token in names:
            following = args[index + 1] if index + 1 < len(args) else None
            if following is not None and following.lower() in _BOOLEAN_LITERALS:
                result.append(f"{token}={following}")
                index += 2
                continue
            result.append(f"{token}=true")
        else:
            result.append(token)
        index += 1
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_options(command_name: str, args: Sequence[str]) -> OptionSet:
    """Parse *args* (the vector after the program name) into an OptionSet.

    Parameters
    ----------
    command_name:
        Program name shown in diagnostics and usage text.
    args:
        Raw argument vector.  Options and goals may be intermixed; every
        token after the first ``--`` is a goal, taken verbatim.

    Raises
    ------
    ParseError
        When a token matches no declared option (abbreviations included),
        an option is missing its value, or a value fails conversion.
    """
    parser = build_parser(command_name)
    options_part, verbatim_goals = _split_end_of_options(args)
    _reject_abbreviations(options_part)
    namespace = parser.parse_intermixed_args(_attach_optional_booleans(options_part))

    values: dict[str, Any] = {}
    for spec in OPTIONS:
        raw = getattr(namespace, spec.dest)
        if spec.arity in (Arity.REPEATABLE, Arity.LIST):
            values[spec.dest] = tuple(raw or ())
        elif spec.arity is Arity.FLAG:
            values[spec.dest] = bool(raw)
        else:
            values[spec.dest] = raw

    return OptionSet(
        command_name=command_name,
        raw_args=tuple(args),
        goals=(*(getattr(namespace, GOALS.dest) or ()), *verbatim_goals),
        **values,
    )


def render_usage(command_name: str = DEFAULT_COMMAND_NAME) -> str:
    """Return the usage/help text for *command_name*.

    The text depends only on the option table and *command_name*, never
    on the terminal size.
    """
    return build_parser(command_name).format_help()


def deprecated_options_used(options: OptionSet) -> list[str]:
    """Return the primary names of deprecated options set in *options*."""
    return [
        spec.names[-1]
        for spec in OPTIONS
        if spec.deprecated and getattr(options, spec.dest) is not None
    ]
