"""Helpers for turning user-entered text into names that are safe as file names."""

import re

_INVALID_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\n\r]+')


def strip_invalid_filename_chars(name: str) -> str:
    """
    Remove characters that are not allowed in file names on common platforms.

    Parameters
    ----------
    name : str
        Raw name, e.g. from a text field

    Returns
    -------
    str
        ``name`` with path separators, wildcards, quotes, angle brackets,
        pipes and line breaks removed, and surrounding whitespace trimmed

    Examples
    --------
    >>> strip_invalid_filename_chars(' tumor/stroma: v2 ')
    'tumorstroma v2'
    >>> strip_invalid_filename_chars('???')
    ''
    """
    if name is None:
        return ""
    return _INVALID_FILENAME_CHARS.sub("", name).strip()
