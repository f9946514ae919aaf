"""General utils functions"""

ACTION_WIDTH = 12


def format_action(action: str, message: str) -> str:
    """Format a log line as a right-aligned action label followed by details.

    >>> format_action("clone", "a -> b")
    '       clone a -> b'
    """
    return f"{action:>{ACTION_WIDTH}} {message}"
