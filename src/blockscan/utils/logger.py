"""Logger naming for blockscan.

Every module logs under the ``blockscan`` hierarchy, so one handler on the
``blockscan`` logger sees everything:

- DEBUG from the processor when input ends inside a possible delimiter,
  and from attribute decoding when a JSON blob is rejected.
- WARNING from parse_blocks() when it keeps an unscanned tail as HTML.

Nothing is logged per token, and no handlers are installed here.

Example:
    >>> import logging
    >>> logging.getLogger("blockscan").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the standard library logger for ``name`` under ``blockscan.``.

    Module names inside the package are used as is.

    Example:
        >>> get_logger("blockscan.parser").name
        'blockscan.parser'
        >>> get_logger("plugin").name
        'blockscan.plugin'
    """
    if not (name == "blockscan" or name.startswith("blockscan.")):
        name = f"blockscan.{name}"
    return logging.getLogger(name)
