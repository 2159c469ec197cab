import dataclasses
import io
import logging
from collections.abc import Callable, Iterable
from typing import TextIO

Config = dict[str, dict[str, str]]

COMMENT_MARKERS = (";", "#")

_log = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class Section:
    """An INI section, i.e. [name]."""

    name: str


@dataclasses.dataclass(slots=True)
class Property:
    """An INI property, i.e. key=value."""

    key: str
    value: str


@dataclasses.dataclass(slots=True)
class Comment:
    """A full-line INI comment, i.e. ; text or # text."""

    text: str


Line = Section | Property | Comment


def strip_comment(value: str) -> str:
    """Cut a value at the earliest inline comment marker.

    Args:
        value: The value to strip.

    Returns:
        The value up to (not including) the first ';' or '#', with whitespace trimmed.
    """

    cut = min((i for i in map(value.find, COMMENT_MARKERS) if i != -1), default=-1)
    if cut != -1:
        value = value[:cut]

    return value.strip()


def parse(line: str) -> Line | None:
    """Parse an INI line.

    Args:
        line: The line to parse.

    Returns:
        A section, property, comment, or None if the line is blank or malformed.
    """

    line = line.strip()
    if not line:
        return None

    if line[0] in COMMENT_MARKERS:
        return Comment(line[1:].strip())

    if line[0] == "[" and line[-1] == "]":
        return Section(line[1:-1].strip())

    key, eq, value = line.partition("=")
    if not eq:
        return None

    return Property(key=key.strip(), value=strip_comment(value))


def load(
    file: Iterable[str],
    parse_func: Callable[[str], Line | None] = parse,
) -> Config:
    """Parse an INI file.

    Lines that fail to parse are skipped, so a garbled file degrades to partial data.

    Args:
        file: The file to parse.
        parse_func: A function that returns a section, property, comment or None per line in the file.
            This function can be overriden to implement custom functionality.
            Defaults to parse.

    Returns:
        A dictionary of sections mapped to their properties.
        Properties before the first section are under the empty section "".
    """

    config: Config = {}
    section = ""

    for n, line in enumerate(file, start=1):
        match parse_func(line):
            case Section(name=name):
                section = name
            case Property(key=key, value=value):
                config.setdefault(section, {})[key] = value
            case None if line.strip():
                _log.debug("skipping malformed line %d: %r", n, line)

    return config


def loads(text: str, **kwargs) -> Config:
    """Parse an INI text.

    Args:
        text: The text to parse.
        **kwargs: Passed to load().

    Returns:
        See load().
    """

    # Only newlines end a line; a trailing carriage return is trimmed by parse().
    return load(text.split("\n"), **kwargs)


def dump(config: Config, file: TextIO):
    """Serialize a dictionary as INI to a file.

    Properties in the empty section are written first, without a header.

    Args:
        config: The dictionary of sections mapped to properties.
        file: The file to serialize to.
    """

    for key, value in config.get("", {}).items():
        print(f"{key}={value}", file=file)

    for section, properties in config.items():
        if not section:
            continue

        print(f"[{section}]", file=file)

        for key, value in properties.items():
            print(f"{key}={value}", file=file)


def dumps(config: Config) -> str:
    """Serialize a dictionary as INI to a string.

    Args:
        config: The dictionary of sections mapped to properties.

    Returns:
        The INI as a string.
    """

    with io.StringIO() as buf:
        dump(config, buf)
        return buf.getvalue()
