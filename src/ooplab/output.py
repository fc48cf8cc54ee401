"""
Console construction shared by all demonstration modules
"""

from rich.console import Console


def make_console(stderr: bool = False) -> Console:
    """
    Build a console that prints lines without markup interpretation

    Markup, emoji and highlighting are disabled so text such as
    "[Debug] ..." reaches the stream unchanged, and soft wrapping keeps
    long lines on a single line. Tab characters are still expanded to
    spaces (tab stops every 8 columns).
    """
    return Console(
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
