import logging
import re

from app.core.errors import InvalidArgumentError


logger = logging.getLogger(__name__)

# Characters stripped from both ends of every stored string
_LEADING_JUNK = re.compile(r"^[\s\"',;]+")
_TRAILING_JUNK = re.compile(r"[\s\"',;]+$")
_WHITESPACE_RUN = re.compile(r"\s{2,}")
_NAME_DELIMITER = re.compile(r"[,;]")


def normalize(value: str) -> str:
    """Cleans a raw string before it is stored on a domain entity.

    Strips whitespace, single/double quotes, commas and semicolons from both
    ends, then collapses internal whitespace runs to a single space.

    Args:
        value (str): The raw input, e.g. a form field or CSV cell.

    Returns:
        str: The normalized string. Applying it twice changes nothing.
    """
    value = _LEADING_JUNK.sub("", value)
    value = _TRAILING_JUNK.sub("", value)
    return _WHITESPACE_RUN.sub(" ", value.strip())


def split_full_name(full_name: str | None) -> tuple[str, str]:
    """Splits a free-text person name into (first_name, last_name).

    Best-effort heuristic, no notion of honorifics or suffixes:
    - "Lastname, Firstname" (or ';'): split once at the first delimiter.
    - Otherwise the last word is the last name, everything before it
      the first name(s). A single word is treated as a last name.

    Args:
        full_name (str | None): The whole name as typed by a user.

    Returns:
        tuple[str, str]: Normalized first and last name.

    Raises:
        InvalidArgumentError: If the name is None or blank.
    """
    if full_name is None or not full_name.strip():
        raise InvalidArgumentError("name may not be None or empty")

    name = normalize(full_name)

    if _NAME_DELIMITER.search(name):
        last, first = _NAME_DELIMITER.split(name, maxsplit=1)
        logger.debug(f"Split '{name}' at delimiter into last/first.")
        return normalize(first), normalize(last)

    tokens = name.split()
    if len(tokens) <= 1:
        # Nothing but quotes/delimiters leaves no token at all
        logger.debug(f"Treating '{name}' as a last name only.")
        return "", normalize(tokens[0]) if tokens else ""

    logger.debug(f"Split '{name}' on whitespace into {len(tokens)} tokens.")
    return normalize(" ".join(tokens[:-1])), normalize(tokens[-1])
