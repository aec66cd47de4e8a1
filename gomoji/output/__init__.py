"""Terminal Output Formatting Package"""

import os
import re
import sys


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(*lines: str) -> None:
    """Print an error block to stderr. The first line carries the marker."""
    if not lines:
        return
    print(f"{error(CROSS)} {error(lines[0])}", file=sys.stderr)
    for line in lines[1:]:
        print(f"  {error(line)}", file=sys.stderr)


def print_section(title: str, lines: list[str], color: str = Colors.GREEN) -> None:
    """Print a titled block of lines with a colored gutter."""
    rule = '─' if UNICODE_ENABLED else '-'
    side = '│' if UNICODE_ENABLED else '|'
    width = max((len(line) for line in lines), default=0)
    width = max(width, len(title) + 2)
    print(_colorize(f"{rule} {title} {rule * max(width - len(title) - 2, 1)}", Colors.BOLD, color))
    for line in lines:
        print(f"{_colorize(side, color)} {line}")
    print(_colorize(rule * (width + 2), color))


_HEADER_RE = re.compile(r'^(\S+) (\[[^\]]*\])')


def colorize_header(message: str) -> str:
    """Color the intent code and scope on the first line of a commit message."""
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    match = _HEADER_RE.match(lines[0])
    if match:
        code, scope = match.group(1), match.group(2)
        lines[0] = f"{_colorize(code, Colors.BOLD, Colors.MAGENTA)} {_colorize(scope, Colors.CYAN)}" \
                   + lines[0][match.end():]
    return '\n'.join(lines)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_section",
    "colorize_header",
]
