"""
argline parser: register, parse, look up.

What this module provides
- Parser: owns a Registry and the result map of the last parse.
  • add_argument / add_argument_pack / add_option: declarative registration,
    each returning a Registration (truthy on success, carries the fault otherwise).
  • evaluate(argv): non-terminating parse returning an Outcome.
  • parse(argv): the command-line boundary; prints help/usage/diagnostics and
    exits the process when the invocation cannot go on.
  • parser[name]: Value lookup by argument name, long or short option name.
  • usage_info() / help_info(): generated text.

Quick start
    from argline import Parser

    parser = Parser("cat", "show text file context")
    parser.add_argument("file", "text file path")
    parser.add_option("--lines", 1, "-l", "line count to show", True)
    parser.add_option("--back", 0, "-b", "from the back")
    parser.parse()

    if parser["--lines"]:
        count = parser["-l"][0].to_int()

Built-in requests
- When the only token is "--help" (or "--usage") and the caller has not
  registered an option with that name, evaluate() reports a help (usage)
  request instead of parsing; parse() prints the text to stdout and exits 0.

Failures
- Registration: reported on the stderr console and returned as the
  Registration's fault; raised instead when the parser is strict.
- Parsing: evaluate() returns Outcome(Status.FAILED, fault=...). parse()
  prints the diagnostic, the usage line and a "--help" hint, then exits with
  status -1.
"""
import shlex
import sys
from collections.abc import Iterable
from enum import IntEnum
from types import MappingProxyType
from typing import NamedTuple

from rich.console import Console

from .faults import *
from .registry import Registry
from .text import usage_info, help_info
from .tokens import classify
from .utils import Unset, mirror
from .validation import validate, assemble
from .values import Value

stdout = Console()


class Status(IntEnum):
    PARSED = 0
    HELP = 1
    USAGE = 2
    FAILED = 3


class Outcome(NamedTuple):
    status: Status
    values: MappingProxyType = MappingProxyType({})
    fault: ParseError | None = None
    warnings: tuple = ()

    def __bool__(self):
        return self.status is Status.PARSED


class Registration(NamedTuple):
    fault: RegistrationError | None = None

    def __bool__(self):
        return self.fault is None


def _tokenize(argv):
    # argv[0] is the invocation path; empty tokens are meaningful and kept.
    if argv is Unset:
        return list(sys.argv)
    if isinstance(argv, str):
        return shlex.split(argv)
    if not isinstance(argv, Iterable):
        raise TypeError("parse() argument must be a string or an iterable of strings")
    tokens = list(argv)
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError("parse() argument must be a string or an iterable of strings")
    return tokens


class Parser:
    """
    Declarative command-line parser.

    Parameters
    - name: str
      Declared command name, shown in help text (default "command").
    - note: str
      One-line command description shown under the help usage line.
    - strict: bool (keyword-only)
      Raise RegistrationError on a rejected registration instead of reporting it.
    - colorful: bool (keyword-only)
      Style diagnostics on the stderr console.
    - fancy: bool (keyword-only)
      Draw diagnostics inside a panel.

    Notes
    - A parser is not reentrant: each parse clears and rebuilds its result map.
    - Values handed out by lookups are immutable snapshots.
    """

    name = mirror("name")
    note = mirror("note")
    path = mirror("path")
    strict = mirror("strict")
    colorful = mirror("colorful")
    fancy = mirror("fancy")
    values = mirror("values")

    def __init__(self, name="command", note="", *, strict=False, colorful=False, fancy=False):
        if not isinstance(name, str):
            raise TypeError("parser 'name' must be a string")
        if not isinstance(note, str):
            raise TypeError("parser 'note' must be a string")
        self._name = name
        self._note = note
        self._strict = bool(strict)
        self._colorful = bool(colorful)
        self._fancy = bool(fancy)
        self._path = ""
        self._registry = Registry()
        self._values = MappingProxyType({})

    @property
    def registry(self):
        return self._registry

    def __repr__(self):
        return "parser(name=%r, arguments=%r, options=%r)" % (
            self._name,
            [argument.name for argument in self._registry.arguments],
            [option.name for option in self._registry.options],
        )

    def __rich_repr__(self):
        yield "name", self._name
        yield "note", self._note
        yield "arguments", self._registry.arguments
        yield "options", self._registry.options

    def _options(self):
        return {
            "prog": self._path or self._name or "command",
            "colorful": self._colorful,
            "fancy": self._fancy,
        }

    def _register(self, method, /, *args):
        try:
            method(*args)
        except RegistrationError as fault:
            if self._strict:
                raise
            trigger(fault, shell=True, deferred=True, **self._options())
            return Registration(fault)
        return Registration()

    def add_argument(self, name, note="", numeric=False):
        """
        Register a positional argument after the ones already declared.
        """
        return self._register(self._registry.add_argument, name, note, numeric)

    def add_argument_pack(self, name, note="", numeric=False):
        """
        Register the pack argument, which absorbs every positional token the
        other arguments leave over (at least one). Only one pack is allowed.
        """
        return self._register(self._registry.add_argument_pack, name, note, numeric)

    def add_option(self, name, arity=0, short="", note="", numeric=False):
        """
        Register an option consuming `arity` tokens after its long or short name.
        """
        return self._register(self._registry.add_option, name, arity, short, note, numeric)

    def evaluate(self, argv=Unset, /):
        """
        Parse `argv` without printing or exiting.

        Parameters
        - argv: Unset | str | Iterable[str]
          • Unset: sys.argv.
          • str: split shell-style with shlex.split.
          • Iterable[str]: used as is.
          The first item is the invocation path; the rest are tokens.

        Returns
        - Outcome: PARSED (with the values), HELP, USAGE, or FAILED (with the fault).
        """
        self._path = ""
        self._values = MappingProxyType({})

        if not (argv := _tokenize(argv)):
            return Outcome(Status.FAILED, fault=EmptyVectorError(
                "argument count must be > 0, current: 0",
                title="empty argument vector",
                code=FaultCode.EMPTY_VECTOR
            ))

        self._path, *tokens = argv

        if tokens == ["--help"] and self._registry.option("--help") is None:
            return Outcome(Status.HELP)
        if tokens == ["--usage"] and self._registry.option("--usage") is None:
            return Outcome(Status.USAGE)

        try:
            classification = classify(self._registry, tokens)
            bound = validate(self._registry, classification.positionals)
        except ParseError as fault:
            return Outcome(Status.FAILED, fault=fault)

        self._values = assemble(self._registry, bound, classification.options)
        return Outcome(Status.PARSED, self._values, warnings=classification.warnings)

    def parse(self, argv=Unset, /):
        """
        Parse `argv` (sys.argv by default) and handle every terminal condition.

        Returns True when parsing succeeded. Otherwise the process exits:
        - status 0 after printing help (or usage) to stdout for a lone
          "--help" (or "--usage") token;
        - status -1 after printing the diagnostic, the usage line and a hint to
          run with "--help" on stderr.
        """
        outcome = self.evaluate(argv)

        for warning in outcome.warnings:
            trigger(warning, shell=True, **self._options())

        match outcome.status:
            case Status.HELP:
                stdout.out(self.help_info(), highlight=False)
                sys.exit(0)
            case Status.USAGE:
                stdout.out(self.usage_info(), highlight=False)
                sys.exit(0)
            case Status.FAILED:
                if self._registry.option("--help") is None:
                    hint = "Try '%s --help' for more information." % (self._path or self._name)
                else:
                    hint = None
                trigger(
                    outcome.fault,
                    shell=True,
                    status=-1,
                    usage=self.usage_info(),
                    hint=hint,
                    **self._options()
                )
        return True

    def __getitem__(self, name, /):
        return self._values.get(name, Value())

    def usage_info(self):
        return usage_info(self._registry, self._path or "command")

    def help_info(self):
        return help_info(self._registry, self._name or "command", self._note)


__all__ = (
    "Status",
    "Outcome",
    "Registration",
    "Parser",
)
