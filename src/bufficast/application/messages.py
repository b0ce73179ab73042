"""Pulls the quoted chat messages out of an inbound request."""

import re
from typing import List, Optional

# "straight" or “typographic” pairs; every pair is consumed, blank ones are dropped after matching
_QUOTED = re.compile(r'"([^"]*)"|“([^”]*)”')


def extract_messages(text: Optional[str]) -> Optional[List[str]]:
    """
    Return quoted fragments in order of appearance, or None if there are none.

    >>> extract_messages('make a speech "eth denver is awesome", "gm"')
    ['eth denver is awesome', 'gm']
    """
    if not text:
        return None
    messages = []
    for match in _QUOTED.finditer(text):
        fragment = match.group(1) if match.group(1) is not None else match.group(2)
        if fragment.strip():
            messages.append(fragment)
    return messages or None
