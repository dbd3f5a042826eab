"""Transcript acquisition for the command line.

The parser does not care where the transcript comes from. On the
command line it is either given as arguments or piped on stdin, e.g.
the output of a speech-to-text tool.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO


def get_input_text(words: Sequence[str], stream: Optional[TextIO] = None) -> str:
    """Obtain the raw transcript.

    Parameters
    ----------
    words
        Positional command-line words. Joined with single spaces when
        present.
    stream
        Fallback stream read when no words are given, stdin by default.

    Returns
    -------
    str
        The transcript, with a trailing newline removed.
    """
    if words:
        return " ".join(words)
    stream = stream if stream is not None else sys.stdin
    if stream.isatty():
        return ""
    return stream.read().rstrip("\n")
