"""
argline validator and result assembly.

validate(registry, positionals) enforces positional arity and numeric-only
constraints and returns, per argument, the token(s) it owns:

- without a pack, the positional count must equal the number of arguments;
- with a pack, the non-pack arguments take one token each in declaration order
  and the pack takes everything else, which must be at least one token.

assemble(registry, bound, options) turns the bound tokens and the captured
option values into the flat name → Value result map. Options are stored under
their long and (when declared) short name.
"""
from types import MappingProxyType

from .faults import *
from .values import Value, parse_integer


def _check_number(argument, token):
    if argument.numeric and parse_integer(token) is None:
        raise NumberRequiredError(
            "argument %s<%s> value requires a number, current: %s" % (
                "pack " if argument.pack else "", argument.name, token
            ),
            title="number required",
            code=FaultCode.NUMBER_REQUIRED,
            argument=argument.name,
            token=token
        )


def validate(registry, positionals, /):
    """
    Bind positional tokens to the registered arguments.

    Returns
    - list of (Argument, tokens) pairs in declaration order; `tokens` is a
      str for plain arguments and a tuple of str for the pack.

    Raises
    - ArgumentCountError: no pack and the counts differ.
    - InsufficientArgumentsError: a pack is registered and the non-pack
      arguments or the pack itself would go without tokens.
    - NumberRequiredError: a numeric argument received a non-integer token.
    """
    arguments = registry.arguments
    positionals = tuple(positionals)

    if not registry.has_pack:
        if len(positionals) != len(arguments):
            pairs = " ".join(
                "<%s:%s>" % (
                    arguments[index].name if index < len(arguments) else " ",
                    positionals[index] if index < len(positionals) else " "
                )
                for index in range(max(len(arguments), len(positionals)))
            )
            raise ArgumentCountError(
                "argument count must be: %d, current: %d, they are: %s" % (len(arguments), len(positionals), pairs),
                title="argument count mismatch",
                code=FaultCode.ARGUMENT_COUNT,
                expected=len(arguments),
                received=len(positionals)
            )
        for argument, token in zip(arguments, positionals):
            _check_number(argument, token)
        return list(zip(arguments, positionals))

    base = len(arguments) - 1
    if len(positionals) < base:
        raise InsufficientArgumentsError(
            "argument count at least: %d, current: %d" % (base, len(positionals)),
            title="insufficient arguments",
            code=FaultCode.INSUFFICIENT_ARGUMENTS,
            expected=base,
            received=len(positionals)
        )
    if (size := len(positionals) - base) < 1:
        pack = next(argument for argument in arguments if argument.pack)
        raise InsufficientArgumentsError(
            "argument pack <%s...> value count at least: 1, current: %d" % (pack.name, size),
            title="insufficient arguments",
            code=FaultCode.INSUFFICIENT_ARGUMENTS,
            argument=pack.name,
            expected=1,
            received=size
        )

    bound = []
    cursor = 0
    for argument in arguments:
        if argument.pack:
            tokens = positionals[cursor:cursor + size]
            cursor += size
            for token in tokens:
                _check_number(argument, token)
            bound.append((argument, tokens))
        else:
            _check_number(argument, positionals[cursor])
            bound.append((argument, positionals[cursor]))
            cursor += 1
    return bound


def assemble(registry, bound, options, /):
    """
    Build the read-only result map from bound arguments and captured options.
    """
    values = {}
    for argument, tokens in bound:
        values[argument.name] = Value(tokens)
    for name, captured in options.items():
        values[name] = Value(captured)
        if short := registry.option(name).short:
            values[short] = Value(captured)
    return MappingProxyType(values)


__all__ = (
    "validate",
    "assemble",
)
