"""Immutable document model handed to the renderer."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A single markdown source and where it is published.

    Attributes
    ----------
    name : str
        Display name declared in the spec file.
    desc : str
        Short description; empty when not declared.
    path : Path
        Location of the markdown source, joined onto the content root.
    href : str
        Site-rooted URL path with the ``.html`` suffix, e.g. ``/d1/1.html``.
    date : str
        Last-modified time such as ``1.09.2025 20:34`` or ``"Unknown"``.
    """

    name: str
    desc: str
    path: Path
    href: str
    date: str = dc.field(compare=False)


@dc.dataclass(frozen=True, slots=True)
class Subsection:
    """Second-level directory and the pages declared in it."""

    name: str
    desc: str
    path: Path
    href: str
    pages: tuple[Page, ...] = ()

    def __iter__(self) -> cabc.Iterator[Page]:
        return iter(self.pages)


SectionEntry: typ.TypeAlias = Subsection | Page


@dc.dataclass(frozen=True, slots=True)
class Section:
    """Top-level directory; entries list subsections before pages."""

    name: str
    desc: str
    path: Path
    href: str
    entries: tuple[SectionEntry, ...] = ()

    def __iter__(self) -> cabc.Iterator[SectionEntry]:
        return iter(self.entries)

    @property
    def subsections(self) -> tuple[Subsection, ...]:
        return tuple(entry for entry in self.entries if isinstance(entry, Subsection))

    @property
    def pages(self) -> tuple[Page, ...]:
        return tuple(entry for entry in self.entries if isinstance(entry, Page))


TreeEntry: typ.TypeAlias = Section | Page


@dc.dataclass(frozen=True, slots=True)
class SiteContext:
    """Site-wide values every template receives as ``ctx``."""

    title: str
    append_title: bool
    href_prefix: str
    footer_content: str


@dc.dataclass(frozen=True, slots=True)
class Tree:
    """The assembled site: sections first, then root pages.

    ``main_page`` is the home page published at ``/``. It is not part of
    ``entries``; use :meth:`all_pages` when it must be included.
    """

    root: Path
    title: str
    append_title: bool
    href_prefix: str
    footer_content: str
    main_page: Page
    entries: tuple[TreeEntry, ...] = ()

    def __iter__(self) -> cabc.Iterator[TreeEntry]:
        return iter(self.entries)

    def context(self) -> SiteContext:
        """Return the rendering context derived from the manifest."""
        return SiteContext(
            title=self.title,
            append_title=self.append_title,
            href_prefix=self.href_prefix,
            footer_content=self.footer_content,
        )

    def sections(self) -> cabc.Iterator[Section]:
        """Yield sections in entry order."""
        for entry in self.entries:
            match entry:
                case Section():
                    yield entry
                case Page():
                    continue

    def subsections(self) -> cabc.Iterator[Subsection]:
        """Yield every subsection, section by section."""
        for section in self.sections():
            yield from section.subsections

    def pages(self) -> cabc.Iterator[Page]:
        """Yield root pages, then section pages, then subsection pages.

        The main page is excluded.
        """
        for entry in self.entries:
            match entry:
                case Page():
                    yield entry
                case Section():
                    continue
        for section in self.sections():
            yield from section.pages
        for subsection in self.subsections():
            yield from subsection.pages

    def all_pages(self) -> cabc.Iterator[Page]:
        """Yield the main page followed by :meth:`pages`."""
        yield self.main_page
        yield from self.pages()


__all__ = [
    "Page",
    "Section",
    "SectionEntry",
    "SiteContext",
    "Subsection",
    "Tree",
    "TreeEntry",
]
