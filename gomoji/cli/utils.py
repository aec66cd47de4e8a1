"""CLI Utility Functions"""

from gomoji.output import bold, dim, info


def select_option(label: str, options: list[str], page_size: int = 10) -> int | None:
    """Show a numbered list and return the chosen index, or None if cancelled."""
    print(f"\n{bold(label)}")
    for i, opt in enumerate(options, 1):
        print(f"  {info(f'[{i:>2}]')} {opt}")
        if i % page_size == 0 and i < len(options):
            print(dim("      · · ·"))

    while True:
        try:
            choice = input(f"Select [1-{len(options)}] or (q)uit: ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            return None
        if choice == 'q':
            return None
        try:
            idx = int(choice) - 1
        except ValueError:
            idx = -1
        if 0 <= idx < len(options):
            return idx
        print(f"Enter 1-{len(options)} or q")


def confirm(question: str, default: bool = False) -> bool:
    """Yes/no prompt. Enter picks the default, cancelling answers no."""
    hint = "[Y/n]" if default else "[y/N]"
    try:
        answer = input(f"{question} {dim(hint)} ").strip().lower()
    except (KeyboardInterrupt, EOFError):
        return False
    if not answer:
        return default
    return answer in ('y', 'yes', 's', 'si', 'sí')


def read_lines(label: str) -> list[str]:
    """Read body lines until an empty line or end of input."""
    print(f"{bold(label)} {dim('(empty line to finish)')}")
    lines = []
    while True:
        try:
            line = input()
        except (KeyboardInterrupt, EOFError):
            break
        if not line.strip():
            break
        lines.append(line)
    return lines
