r"""
argline specification registry: what a command expects on its command line.

Specs
- Argument: positional value identified by declaration order. At most one
  argument per registry may be a pack, which absorbs the variable-length tail
  of positional tokens.
- Option: named token (long "--name", optional short "-n") consuming a fixed
  number of trailing tokens (its arity).

Naming rules
- argument names: r"[A-Za-z][A-Za-z0-9_]*", at most 32 characters.
- long option names: "--" followed by an argument-style name, 3..32 characters in total.
- short option names: "-" followed by an argument-style name, 2..16 characters
  in total, unique among all short names.

Ordering
- Arguments keep declaration order.
- Options are looked up by long name but remember their registration index;
  every display (usage/help) walks them in that order, never alphabetically.

The registry only validates and stores. Every rejected registration raises a
RegistrationError subclass carrying the offending name; callers decide whether
that is fatal (see Parser.strict).
"""
import operator
from typing import NamedTuple

from .faults import *
from .utils import verify


class Argument(NamedTuple):
    name: str
    note: str = ""
    numeric: bool = False
    pack: bool = False


class Option(NamedTuple):
    name: str
    short: str = ""
    note: str = ""
    arity: int = 0
    numeric: bool = False
    index: int = 0


class Registry:
    """
    In-memory definitions of positional arguments and named options.

    Lifetime
    - Owned by one Parser for its whole life and populated before parsing.
    - Definitions are immutable tuples; read accessors hand out copies.
    """

    def __init__(self):
        self._arguments = []
        self._options = {}
        self._shorts = {}
        self._pack = False

    @property
    def arguments(self):
        return tuple(self._arguments)

    @property
    def options(self):
        """Registered options in registration order."""
        return tuple(sorted(self._options.values(), key=operator.attrgetter("index")))

    @property
    def has_pack(self):
        return self._pack

    def option(self, token, /):
        """
        Resolve a long or short option name to its Option, or None.
        """
        try:
            return self._options[token]
        except KeyError:
            pass
        try:
            return self._options[self._shorts[token]]
        except KeyError:
            return None

    def is_registered(self, name, /):
        """True when `name` is a known argument, long option or short option name."""
        return self.option(name) is not None or any(argument.name == name for argument in self._arguments)

    def _check_argument(self, name, kind):
        if not verify(name):
            raise InvalidArgumentNameError(
                "%s name %r must be at most 32 characters, start with a letter "
                "and contain only letters, digits or '_'" % (kind, name),
                title="invalid %s name" % kind,
                code=FaultCode.INVALID_ARGUMENT_NAME,
                hint="rename it, for example: %s" % ("file" if kind == "argument" else "files"),
                name=name
            )
        if any(argument.name == name for argument in self._arguments):
            raise DuplicateArgumentError(
                "%s %r already exists" % (kind, name),
                title="duplicated %s" % kind,
                code=FaultCode.DUPLICATED_ARGUMENT,
                hint="every argument name must be unique",
                name=name
            )

    def add_argument(self, name, note="", numeric=False):
        self._check_argument(name, "argument")
        self._arguments.append(Argument(name, str(note), bool(numeric), False))
        return self._arguments[-1]

    def add_argument_pack(self, name, note="", numeric=False):
        if self._pack:
            raise DuplicatePackError(
                "only one argument pack can be added, cannot add %r" % (name,),
                title="duplicated argument pack",
                code=FaultCode.DUPLICATED_PACK,
                hint="register %r as a plain argument instead" % (name,),
                name=name
            )
        self._check_argument(name, "argument pack")
        self._arguments.append(Argument(name, str(note), bool(numeric), True))
        self._pack = True
        return self._arguments[-1]

    def add_option(self, name, arity=0, short="", note="", numeric=False):
        if isinstance(name, str) and name in self._options:
            raise DuplicateOptionError(
                "option %r already exists" % (name,),
                title="duplicated option",
                code=FaultCode.DUPLICATED_OPTION,
                hint="every long option name must be unique",
                name=name
            )
        if not (isinstance(name, str) and 3 <= len(name) <= 32 and name.startswith("--") and verify(name[2:])):
            raise InvalidOptionNameError(
                "option name %r must be at most 32 characters, start with '--' "
                "and contain only letters, digits or '_' after it" % (name,),
                title="invalid option name",
                code=FaultCode.INVALID_OPTION_NAME,
                hint="use a long form such as --lines",
                name=name
            )
        if short:
            if short in self._shorts:
                raise DuplicateShortNameError(
                    "option short name %r already exists" % (short,),
                    title="duplicated short name",
                    code=FaultCode.DUPLICATED_SHORT_NAME,
                    hint="%r is already used by %s" % (short, self._shorts[short]),
                    name=short
                )
            if not (isinstance(short, str) and 2 <= len(short) <= 16 and short.startswith("-") and verify(short[1:])):
                raise InvalidShortNameError(
                    "short name %r must be at most 16 characters, start with '-' "
                    "and contain only letters, digits or '_' after it" % (short,),
                    title="invalid short name",
                    code=FaultCode.INVALID_SHORT_NAME,
                    hint="use a short form such as -l",
                    name=short
                )
        if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
            raise InvalidArityError(
                "option %r value count must be a non-negative integer, got %r" % (name, arity),
                title="invalid arity",
                code=FaultCode.INVALID_ARITY,
                hint="pass 0 for a switch without values",
                name=name
            )
        option = Option(name, short or "", str(note), arity, bool(numeric), len(self._options))
        self._options[name] = option
        if short:
            self._shorts[short] = name
        return option


__all__ = (
    "Argument",
    "Option",
    "Registry",
)
