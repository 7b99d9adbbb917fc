"""
argline faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for all user-facing issues.
  Codes are grouped by tier (registration, parsing, conversion, warnings) so
  logs and searches stay predictable.
- ParserException / ParserWarning: base types that carry message + options and
  know how to render themselves (rich) and how to surface themselves.
- trigger(): central entry point to surface any fault (respecting shell/deferred/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Tiers
- Registration (RegistrationError and subclasses): malformed or duplicate names.
  Non-fatal by default; the parser reports them and hands the fault back.
- Parsing (ParseError and subclasses): a malformed invocation. evaluate() returns
  them as data; parse() prints them with the usage line and exits.
- Conversion (ConversionError): extracting a number from non-numeric content.

Integration
- In non-shell mode, exceptions are raised and warnings are emitted via warnings.warn.
- In shell mode, they are rendered on the stderr console; exceptions then exit
  with the "status" option unless deferred.
"""
import inspect
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping
    - registration (211xx): bad or duplicated argument/option names, bad arity.
    - parsing (221xx): empty vector, missing option values, numeric violations,
      positional count problems.
    - conversion (231xx): typed extraction from non-numeric text.
    - warnings (241xx): recoverable oddities noticed while parsing.
    """
    # --- registration errors (211xx) ---
    INVALID_ARGUMENT_NAME  = 21101
    DUPLICATED_ARGUMENT    = 21102
    DUPLICATED_PACK        = 21103
    INVALID_OPTION_NAME    = 21111
    DUPLICATED_OPTION      = 21112
    INVALID_SHORT_NAME     = 21113
    DUPLICATED_SHORT_NAME  = 21114
    INVALID_ARITY          = 21115

    # --- parse errors (221xx) ---
    EMPTY_VECTOR           = 22101
    MISSING_OPTION_VALUES  = 22111
    NUMBER_REQUIRED        = 22112
    ARGUMENT_COUNT         = 22121
    INSUFFICIENT_ARGUMENTS = 22122

    # --- conversion errors (231xx) ---
    UNCONVERTIBLE_VALUE    = 23101

    # --- warnings (241xx) ---
    REPEATED_OPTION        = 24101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette, *, body=()):
    # shared layout for errors and warnings: header, message, extra body lines, hint.
    main = __import__("__main__")
    options = fault.options
    colorful = options.get("colorful", False)
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment if colorful else Text(fragment.plain)
        return Text(str(fragment), styles[style] if colorful else "")

    prog = text(getattr(main, "__prog__", options.get("prog") or "argline"), "prog-name")
    code = options.get("code")
    header = Text.assemble(
        "[ ",
        prog,
        " — ",
        text(code.normalize() if isinstance(code, FaultCode) else "?", "code"),
        " | ",
        text(str(options.get("title", "fault")).title(), "title"),
        " ]"
    )
    renders = [text(fault.message, "message")]
    renders.extend(text(line, "body") for line in body if line)
    if hint := options.get("hint"):
        renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

    if options.get("fancy", False):
        return Panel(Group(*renders), title=header, title_align="left")
    return Group(header, *renders)


class ParserException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message if isinstance(self.message, str) else ""

    @property
    def code(self):
        return self.options.get("code")

    @property
    def title(self):
        return self.options.get("title")

    @property
    def hint(self):
        return self.options.get("hint")

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title
            "message": "#C8C8D0",  # soft light gray message
            "body": "bold #36C5F0",  # sky-blue usage line
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        }, body=(self.options.get("usage"),))

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self, soft_wrap=True)
        if self.options.get("deferred", False):
            return
        sys.exit(self.options.get("status", -1))

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class RegistrationError(ParserException):
    @property
    def name(self):
        """The offending argument or option name."""
        return self.options.get("name")


class InvalidArgumentNameError(RegistrationError): ...
class DuplicateArgumentError(RegistrationError): ...
class DuplicatePackError(RegistrationError): ...
class InvalidOptionNameError(RegistrationError): ...
class DuplicateOptionError(RegistrationError): ...
class InvalidShortNameError(RegistrationError): ...
class DuplicateShortNameError(RegistrationError): ...
class InvalidArityError(RegistrationError): ...


class ParseError(ParserException): ...


class EmptyVectorError(ParseError): ...
class MissingOptionValuesError(ParseError): ...
class NumberRequiredError(ParseError): ...
class ArgumentCountError(ParseError): ...
class InsufficientArgumentsError(ParseError): ...


class ConversionError(ParserException, ValueError): ...


class ParserWarning(Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message if isinstance(self.message, str) else ""

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",  # amber fault code for warnings
            "title": "bold #FFC2E0",  # softer pinky title for warnings
            "message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        })

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self, soft_wrap=True)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class RepeatedOptionWarning(ParserWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the rich console; otherwise, exceptions are raised.

    typical options
    - prog, shell, fancy, colorful, deferred, status, usage, and any other context
      the reporter may want to keep (e.g., name/token/option/argument).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ParserException",
    "RegistrationError",
    "InvalidArgumentNameError",
    "DuplicateArgumentError",
    "DuplicatePackError",
    "InvalidOptionNameError",
    "DuplicateOptionError",
    "InvalidShortNameError",
    "DuplicateShortNameError",
    "InvalidArityError",
    "ParseError",
    "EmptyVectorError",
    "MissingOptionValuesError",
    "NumberRequiredError",
    "ArgumentCountError",
    "InsufficientArgumentsError",
    "ConversionError",
    "ParserWarning",
    "RepeatedOptionWarning",
    "trigger",
    "getdoc",
)
