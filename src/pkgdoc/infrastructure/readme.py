"""Readme documentation attached to a package.

A package documents itself with a single ``readme.md`` at the top of one
of its directories. A package split across directories may keep its readme
in any one of them, but never in more than one.
"""

from __future__ import annotations

from pathlib import Path

import markdown

from pkgdoc.domain.errors import AmbiguousDocumentation
from pkgdoc.domain.types import NamespaceLike
from pkgdoc.infrastructure.filesystem import find_named_file

README_FILENAME = "readme.md"


class Readme:
    """The readme of *package*, located eagerly and read on demand.

    Raises:
        AmbiguousDocumentation: If more than one distinct readme file is
            found across the package's paths.
    """

    def __init__(self, package: NamespaceLike) -> None:
        self._path: Path | None = None
        for directory in package.paths:
            found = find_named_file(directory, README_FILENAME)
            if found is None or found == self._path:
                continue
            if self._path is not None:
                raise AmbiguousDocumentation(package.id, [str(self._path), str(found)])
            self._path = found

    @property
    def path(self) -> Path | None:
        return self._path

    def exists(self) -> bool:
        return self._path is not None

    @property
    def raw_content(self) -> bytes:
        """The readme file, byte for byte, or ``b""`` when absent."""
        if self._path is None:
            return b""
        return self._path.read_bytes()

    @property
    def content(self) -> str:
        """The readme text, or ``""`` when absent.

        Bytes that are not valid UTF-8 become U+FFFD; see :meth:`is_utf8`.
        """
        return self.raw_content.decode("utf-8", errors="replace")

    def is_utf8(self) -> bool:
        try:
            self.raw_content.decode("utf-8")
        except UnicodeDecodeError:
            return False
        return True

    def content_as_html(self) -> str:
        """The readme rendered from Markdown to HTML."""
        return markdown.markdown(self.content)
