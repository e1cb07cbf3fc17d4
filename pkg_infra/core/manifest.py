"""Read and write a package's DESCRIPTION file.

DESCRIPTION uses the Debian control file (DCF) format::

    Package: mypkg
    Suggests: knitr,
        testthat

A field starts at column 0 with ``Name:``; lines starting with whitespace
continue the previous field. A blank line ends the record, and DESCRIPTION
holds a single record.

Fields whose value was not changed since loading are written back exactly
as they were read, so loading and saving an untouched manifest produces
byte-identical output.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, MutableMapping
from pathlib import Path

from pkg_infra.core.errors import ManifestUnreadable

_FIELD_LINE = re.compile(r"^([^\s:]+):(.*)$")


class Manifest(MutableMapping[str, str]):
    """Ordered field -> value mapping loaded from a DESCRIPTION file.

    Values hold the text after ``Field:`` with the leading space removed.
    Continuation lines are kept verbatim (indentation included), joined
    with ``\\n``.
    """

    def __init__(self, fields: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(fields or {})
        # field -> (value as loaded, raw text as loaded)
        self._raw: dict[str, tuple[str, str]] = {}
        self._leader = ""
        self._trailer = ""
        self._newline = "\n"

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]
        self._raw.pop(key, None)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Manifest({self._values!r})"

    def copy(self) -> Manifest:
        """Return an independent copy that serializes the same way."""
        clone = Manifest(self._values)
        clone._raw = dict(self._raw)
        clone._leader = self._leader
        clone._trailer = self._trailer
        clone._newline = self._newline
        return clone

    @classmethod
    def parse(cls, text: str, source: Path | None = None) -> Manifest:
        """Parse DCF text into a Manifest.

        Raises:
            ManifestUnreadable: If the text is not a single valid DCF record.
        """
        manifest = cls()
        lines = text.splitlines(keepends=True)
        if lines and lines[0].endswith("\r\n"):
            manifest._newline = "\r\n"

        current: str | None = None
        blank_run: list[str] = []
        value_parts: list[str] = []
        raw_parts: list[str] = []

        def _finish() -> None:
            if current is not None:
                value = "\n".join(value_parts)
                manifest._values[current] = value
                manifest._raw[current] = (value, "".join(raw_parts))

        for lineno, line in enumerate(lines, start=1):
            content = line.rstrip("\r\n")

            if not content.strip():
                blank_run.append(line)
                continue

            if blank_run:
                if current is None:
                    manifest._leader = "".join(blank_run)
                    blank_run = []
                else:
                    raise ManifestUnreadable(
                        "DESCRIPTION contains more than one record",
                        path=source,
                        line=lineno,
                    )

            if content[0] in " \t":
                if current is None:
                    raise ManifestUnreadable(
                        "Continuation line before the first field",
                        path=source,
                        line=lineno,
                    )
                value_parts.append(content)
                raw_parts.append(line)
                continue

            match = _FIELD_LINE.match(content)
            if match is None:
                raise ManifestUnreadable(
                    f"Expected 'Field: value', got {content!r}",
                    path=source,
                    line=lineno,
                )

            _finish()
            current = match.group(1)
            if current in manifest._values:
                raise ManifestUnreadable(
                    f"Duplicate field '{current}'",
                    path=source,
                    line=lineno,
                )
            value_parts = [match.group(2).lstrip(" \t")]
            raw_parts = [line]

        _finish()
        manifest._trailer = "".join(blank_run)

        if not manifest._values:
            raise ManifestUnreadable("DESCRIPTION has no fields", path=source)
        return manifest

    def render(self) -> str:
        """Serialize to DCF text in stable field order."""
        blocks: list[str] = []
        for key, value in self._values.items():
            loaded = self._raw.get(key)
            if loaded is not None and loaded[0] == value:
                blocks.append(loaded[1])
            else:
                text = value.replace("\n", self._newline)
                blocks.append(f"{key}: {text}{self._newline}")

        # A block read from the last line of a file may lack a line ending.
        for i, block in enumerate(blocks[:-1]):
            if not block.endswith("\n"):
                blocks[i] = block + self._newline

        return self._leader + "".join(blocks) + self._trailer


def load_manifest(path: Path) -> Manifest:
    """Load DESCRIPTION from ``path``.

    Raises:
        ManifestUnreadable: If the file is missing, undecodable or malformed.
    """
    try:
        with path.open(encoding="utf-8", newline="") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ManifestUnreadable(f"DESCRIPTION not found: {path}", path=path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestUnreadable(f"Could not read DESCRIPTION: {e}", path=path) from e

    return Manifest.parse(text, source=path)


def save_manifest(path: Path, manifest: Manifest) -> None:
    """Rewrite the whole DESCRIPTION file at ``path``."""
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(manifest.render())
