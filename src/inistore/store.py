import logging
import pathlib
from collections import UserDict

from . import encoding as _encoding
from . import ini
from .exceptions import LoadError

_log = logging.getLogger(__name__)


def get(config: ini.Config, section: str, key: str, default: str = "") -> str:
    """Look up a property in a parsed config.

    Args:
        config: The config to look in.
        section: The section name. The empty string is the top-level section.
        key: The property key.
        default: Returned if the section or key does not exist.
            Defaults to the empty string.

    Returns:
        The property value or the default.
    """

    return config.get(section, {}).get(key, default)


class IniStore(UserDict[str, dict[str, str]]):
    """An in-memory INI config, mapping section names to their properties.

    Each call to parse() or load() replaces the whole config with a freshly built one,
    so a config returned earlier is never modified afterwards.

    Attributes:
        path: The file the config was last loaded from, if any.
    """

    path: pathlib.Path | None

    def __init__(self, config: ini.Config | None = None):
        self.path = None

        super().__init__(config)

    @property
    def config(self) -> ini.Config:
        """The current config."""

        return self.data

    def parse(self, text: str) -> ini.Config:
        """Replace the config with one parsed from text.

        Args:
            text: The INI text to parse.

        Returns:
            The new config.
        """

        self.data = ini.loads(text)
        return self.data

    def load(self, path: str | pathlib.Path, encoding: str | None = None) -> ini.Config:
        """Replace the config with one loaded from a file.

        Args:
            path: The INI file to load.
            encoding: The file encoding of the INI file.
                If None, encoding detection is attempted.

        Returns:
            The new config.

        Raises:
            LoadError: The file could not be opened or read. The store is left empty.
            LookupError: The encoding is unknown.
        """

        if isinstance(path, str):
            path = pathlib.Path(path)

        self.data = {}
        self.path = None

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise LoadError(str(path)) from e

        self.data = ini.loads(_encoding.decode(raw, encoding))
        self.path = path

        _log.info("loaded %s: %d section(s)", path, len(self.data))

        return self.data

    def get(self, section: str, key: str, default: str = "") -> str:
        """Look up a property.

        Args:
            section: The section name. The empty string is the top-level section.
            key: The property key.
            default: Returned if the section or key does not exist.
                Defaults to the empty string.

        Returns:
            The property value or the default.
        """

        return get(self.data, section, key, default)

    def sections(self) -> list[str]:
        """Return the names of all sections that hold at least one property."""

        return list(self.data)

    def __repr__(self):
        return f"<{self.__class__.__name__}: {self.data}>"
