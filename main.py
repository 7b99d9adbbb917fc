from rich.console import Console

from argline import Parser
from argline.faults import console as stderr
from argline.utils import Unset

stdout = Console()


def cat(argv=Unset):
    parser = Parser("cat", "show text file context")
    parser.add_argument("file", "text file path")
    parser.add_option("--lines", 1, "-l", "line count to show", True)
    parser.add_option("--back", 0, "-b", "from the back")
    parser.parse(argv)

    try:
        with open(parser["file"].to_string(), encoding="utf-8", errors="replace") as file:
            lines = file.read().splitlines()
    except OSError:
        stderr.out("failed to open file: %s" % parser["file"], highlight=False)
        stdout.out(parser.usage_info(), highlight=False)
        stderr.out("Try '%s --help' for more information." % parser.path, highlight=False)
        return -1

    count = max(0, parser["-l"][0].to_int()) if parser["--lines"] else None
    if count is not None:
        lines = lines[max(0, len(lines) - count):] if parser["--back"] else lines[:count]

    for line in lines:
        stdout.out(line, highlight=False)
    return 0


if __name__ == '__main__':
    raise SystemExit(cat())
