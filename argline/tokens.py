"""
argline tokenizer & classifier.

classify(registry, tokens) splits the raw tokens (program path excluded) into
positional tokens and option invocations:
- a token equal to a registered long or short option name starts an option
  invocation that consumes exactly `arity` following tokens as its values;
- every other token is positional and kept in order.

Option values are checked against the option's numeric flag as they are
consumed. An option given more than once keeps its latest invocation only;
each repetition is reported as a RepeatedOptionWarning in the result.
"""
from collections import deque
from typing import NamedTuple

from .faults import *
from .values import parse_integer


class Classification(NamedTuple):
    positionals: tuple
    options: dict
    warnings: tuple = ()


def classify(registry, tokens, /):
    """
    Classify `tokens` against `registry`.

    Returns
    - Classification(positionals, options, warnings) where options maps each
      matched long name to the tuple of its captured values.

    Raises
    - MissingOptionValuesError: fewer tokens remain than an option's arity.
    - NumberRequiredError: a numeric option received a non-integer value.
    """
    tokens = deque(tokens)
    positionals = []
    options = {}
    repeated = []

    while tokens:
        token = tokens.popleft()
        if (option := registry.option(token)) is None:
            positionals.append(token)
            continue

        if option.name in options:
            repeated.append(RepeatedOptionWarning(
                "option [%s] given again, earlier values %r are discarded" % (option.name, list(options[option.name])),
                title="repeated option",
                code=FaultCode.REPEATED_OPTION,
                hint="pass [%s] once; only its last occurrence is kept" % option.name,
                option=option.name
            ))

        values = []
        for count in range(option.arity):
            if not tokens:
                raise MissingOptionValuesError(
                    "option [%s] value count must be: %d, current: %d" % (option.name, option.arity, count),
                    title="missing option values",
                    code=FaultCode.MISSING_OPTION_VALUES,
                    option=option.name,
                    expected=option.arity,
                    received=count
                )
            value = tokens.popleft()
            if option.numeric and parse_integer(value) is None:
                raise NumberRequiredError(
                    "option [%s] value requires a number, current: %s" % (option.name, value),
                    title="number required",
                    code=FaultCode.NUMBER_REQUIRED,
                    option=option.name,
                    token=value
                )
            values.append(value)
        # last occurrence wins
        options[option.name] = tuple(values)

    return Classification(tuple(positionals), options, tuple(repeated))


__all__ = (
    "Classification",
    "classify",
)
