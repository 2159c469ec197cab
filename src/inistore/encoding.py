from collections.abc import Iterable

import chardet

DEFAULT_ENCODING = "utf-8"

# Encodings that are subsets of UTF-8 and are widened to it.
_UTF8_SUBSETS = {"ascii"}


def detect_encoding(file: Iterable[bytes]) -> str | None:
    """Guess the encoding of a binary file, stopping as soon as chardet is confident.

    Args:
        file: The lines of the file.

    Returns:
        The lowercased encoding, or None if chardet could not tell.
    """

    detector = chardet.UniversalDetector()

    for line in file:
        detector.feed(line)
        if detector.done:
            break

    encoding = (detector.close()["encoding"] or "").lower()
    if encoding in _UTF8_SUBSETS:
        return DEFAULT_ENCODING

    return encoding or None


def decode(data: bytes, encoding: str | None = None) -> str:
    """Decode raw bytes, detecting the encoding if not given.

    Undecodable bytes are replaced rather than raising.

    Args:
        data: The bytes to decode.
        encoding: The encoding to use. If None, detection is attempted,
            falling back to UTF-8.

    Returns:
        The decoded text.

    Raises:
        LookupError: The encoding is unknown.
    """

    if encoding is None:
        encoding = detect_encoding(data.splitlines(keepends=True)) or DEFAULT_ENCODING

    return data.decode(encoding, errors="replace")
