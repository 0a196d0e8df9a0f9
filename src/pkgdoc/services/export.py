"""ExportService — render package readmes to a static HTML site.

One page per documented package plus an ``index.html`` grouping packages
by package root, with sub-packages nested under their parent. Templates
come from ``pkgdoc/templates/export`` and may be overridden per project
under ``.pkgdoc/templates/``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pkgdoc.domain.errors import AmbiguousDocumentation, PkgdocError
from pkgdoc.domain.identifiers import SEPARATOR
from pkgdoc.infrastructure.package import Package
from pkgdoc.infrastructure.readme import Readme
from pkgdoc.infrastructure.templates import build_template_environment
from pkgdoc.services.base import BaseService
from pkgdoc.services.discovery import NO_PACKAGE_ROOTS
from pkgdoc.services.result import ServiceResult
from pkgdoc.services.telemetry import trace_span, traced

INDEX_FILENAME = "index.html"


def page_filename(package_id: str) -> str:
    """``Company\\Library\\Sub1`` -> ``Company.Library.Sub1.html``."""
    return package_id.replace(SEPARATOR, ".") + ".html"


@dataclass
class _Entry:
    """A package as it appears in the exported index."""

    id: str
    file: str | None
    html: str = ""
    children: list[_Entry] = field(default_factory=list)

    @property
    def listed(self) -> bool:
        return self.file is not None or any(c.file is not None for c in self.children)


def _walk(entries: list[_Entry]) -> Iterator[tuple[_Entry, _Entry | None]]:
    """Yield each entry with its parent, sub-packages right after their parent."""
    for entry in entries:
        yield entry, None
        for child in entry.children:
            yield child, entry


class ExportService(BaseService):
    """Export package documentation in portable formats."""

    @traced
    def export_html(
        self,
        output_dir: Path,
        package_roots: Sequence[str] | None = None,
    ) -> ServiceResult:
        """Write one HTML page per documented package, plus an index.

        A package whose readme is ambiguous is listed without a page and
        reported as a warning rather than failing the whole export. A
        package reached more than once is exported once.
        """
        roots = self._project.package_roots(package_roots)
        if not roots:
            return self._error("export_html", NO_PACKAGE_ROOTS, "No package roots given")

        config = self._project.settings.export
        warnings: list[str] = []
        grouped: list[tuple[str, list[_Entry]]] = []
        try:
            with trace_span("collect"):
                for root in roots:
                    grouped.append((root, self._collect(root, warnings)))
        except (PkgdocError, OSError) as exc:
            return self._failure("export_html", exc)

        output_dir = output_dir.resolve()
        env = build_template_environment("export", project_root=self._project.root)
        files: list[str] = []
        documented = undocumented = 0
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            with trace_span("render"):
                page = env.get_template("package.html.j2")
                for _root, entries in grouped:
                    for item, parent in _walk(entries):
                        if item.file is None:
                            undocumented += 1
                            continue
                        documented += 1
                        target = output_dir / item.file
                        target.write_text(
                            page.render(
                                title=config.title, package=item, parent=parent, html=item.html
                            ),
                            encoding="utf-8",
                        )
                        files.append(str(target))

                index_roots: list[dict[str, Any]] = []
                for root, entries in grouped:
                    listed = [
                        e for e in entries if config.include_undocumented or e.listed
                    ]
                    if not config.include_undocumented:
                        for e in listed:
                            e.children = [c for c in e.children if c.file is not None]
                    index_roots.append({"id": root, "packages": listed})
                index = output_dir / INDEX_FILENAME
                index.write_text(
                    env.get_template("index.html.j2").render(
                        title=config.title, roots=index_roots
                    ),
                    encoding="utf-8",
                )
                files.append(str(index))
        except OSError as exc:
            return self._failure("export_html", exc)

        return ServiceResult(
            ok=True,
            op="export_html",
            data={
                "output_dir": str(output_dir),
                "files": files,
                "count": len(files),
                "documented": documented,
                "undocumented": undocumented,
            },
            warnings=warnings,
        )

    def _collect(self, root: str, warnings: list[str]) -> list[_Entry]:
        entries: list[_Entry] = []
        seen: set[str] = set()
        for package in self._project.finder([root]):
            # Scanned and declared packages can coincide.
            if package.id in seen:
                continue
            seen.add(package.id)
            entry = self._entry(package, warnings)
            if package.is_sub_package and entries:
                entries[-1].children.append(entry)
            else:
                entries.append(entry)
        return entries

    @staticmethod
    def _entry(package: Package, warnings: list[str]) -> _Entry:
        try:
            readme = Readme(package)
        except AmbiguousDocumentation as exc:
            warnings.append(f"{exc} ({', '.join(exc.paths)})")
            return _Entry(id=package.id, file=None)
        if not readme.exists():
            return _Entry(id=package.id, file=None)
        if not readme.is_utf8():
            warnings.append(f"{readme.path} is not valid UTF-8; undecodable bytes were replaced")
        return _Entry(id=package.id, file=page_filename(package.id), html=readme.content_as_html())
