"""
argline text generator: usage line and help text.

Both renderers are pure functions of the registry plus an explicit display
name; they never read parse state. The layout is plain text; styling is left to the
console.

Usage line
    Usage: <display> <file> <rest...: NUM> [-l|--lines N1] [--name V1 V2]

Help text
    usage line (with the command's declared name)
    command note
    <blank>
    Argument with '...' is package, 'N' means number, 'V' means string:
     <file>: V           text file path
    <blank>
    Option value with 'N' means number, 'V' means string:
     [-l|--lines N1]           line count to show

The note column starts at min(50, longest left cell + 10). Notes may contain
line breaks; continuation lines are indented to the note column.
"""

ARGUMENTS_LEGEND = "Argument with '...' is package, 'N' means number, 'V' means string: "
OPTIONS_LEGEND = "Option value with 'N' means number, 'V' means string: "


def _names(option):
    return option.short + "|" + option.name if option.short else option.name


def _placeholders(option):
    return ["%s%d" % ("N" if option.numeric else "V", index + 1) for index in range(option.arity)]


def _width(lefts):
    return min(50, max(map(len, lefts)) + 10)


def wrap(note, width, /):
    """
    Lay out a note after its left cell; lines after the first are padded to `width`.
    """
    if not note:
        return ""
    *lines, last = note.split("\n")
    text = "".join(" " + line + "\n" + " " * width for line in lines)
    if last:
        text += " " + last
    return text


def usage_info(registry, display, /):
    segments = ["Usage: " + display]
    for argument in registry.arguments:
        segments.append("<%s%s%s>" % (
            argument.name,
            "..." if argument.pack else "",
            ": NUM" if argument.numeric else ""
        ))
    for option in registry.options:
        segments.append("[%s]" % " ".join([_names(option), *_placeholders(option)]))
    return " ".join(segments)


def _section(legend, lefts, notes):
    width = _width(lefts)
    rows = ["\n", legend, "\n"]
    for left, note in zip(lefts, notes):
        rows.append(left.ljust(width) + wrap(note, width) + "\n")
    return "".join(rows)


def help_info(registry, display, note="", /):
    text = usage_info(registry, display) + "\n"
    if note:
        text += note + "\n"

    if arguments := registry.arguments:
        text += _section(
            ARGUMENTS_LEGEND,
            [
                " <%s%s: %s" % (argument.name, "...>" if argument.pack else ">", "N" if argument.numeric else "V")
                for argument in arguments
            ],
            [argument.note for argument in arguments]
        )

    if options := registry.options:
        text += _section(
            OPTIONS_LEGEND,
            [" [%s]" % " ".join([_names(option), *_placeholders(option)]) for option in options],
            [option.note for option in options]
        )

    return text


__all__ = (
    "ARGUMENTS_LEGEND",
    "OPTIONS_LEGEND",
    "wrap",
    "usage_info",
    "help_info",
)
