"""Assemble a discovered :class:`~wgen.discover.Structure` into a :class:`Tree`.

Assembly parses every spec file named by the skeleton, resolves declared pages
into hrefs and dates, and attaches children in a fixed order: within a section
all subsections come before the section's own pages, and within the tree all
sections come before the root pages. Declaration order inside a spec file does
not change that.

Failure handling follows the node level. A manifest that cannot be read ends
the build with :class:`~wgen.errors.ManifestError`. A section or subsection
whose spec cannot be read is dropped with a warning and the remaining siblings
are kept in their original order. A page whose source is missing still appears
in the tree with the ``"Unknown"`` date.

Examples
--------
>>> from pathlib import Path
>>> from wgen.discover import collect_from
>>> from wgen.tree import build_tree
>>> tree = build_tree(collect_from(Path("site")))  # doctest: +SKIP
>>> [page.href for page in tree.pages()]  # doctest: +SKIP
['/1.html', '/d1/1.html', '/d1/s1/1.html']
"""

from __future__ import annotations

import concurrent.futures as cf
import dataclasses as dc
import logging
import typing as typ

from wgen.discover import collect_from
from wgen.errors import SkippedNodeError
from wgen.spec import read_manifest, read_section_spec, read_subsection_spec

from .helpers import derive_href, main_page, page_from_spec
from .models import Page, Section, SectionEntry, Subsection, Tree, TreeEntry

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from wgen.discover import SectionSkeleton, Structure, SubsectionSkeleton

_LOGGER = logging.getLogger(__name__)

NodeT = typ.TypeVar("NodeT")
ResolvedT = typ.TypeVar("ResolvedT")


@dc.dataclass(frozen=True, slots=True)
class _Outcome(typ.Generic[ResolvedT]):
    """Result of resolving one child node: a value or the reason it was skipped."""

    value: ResolvedT | None = None
    error: SkippedNodeError | None = None


def _attempt(
    resolve: cabc.Callable[[NodeT], ResolvedT], node: NodeT
) -> _Outcome[ResolvedT]:
    try:
        return _Outcome(value=resolve(node))
    except SkippedNodeError as exc:
        return _Outcome(error=exc)


def _keep_resolved(
    outcomes: cabc.Iterable[_Outcome[ResolvedT]], log: logging.Logger
) -> list[ResolvedT]:
    """Log every skipped outcome and return the resolved values in order."""
    kept: list[ResolvedT] = []
    for outcome in outcomes:
        if outcome.error is not None:
            log.warning("Could not read the spec %s", outcome.error)
            continue
        kept.append(typ.cast("ResolvedT", outcome.value))
    return kept


class TreeBuilder:
    """Turn a skeleton into the immutable site tree."""

    def __init__(
        self,
        structure: Structure,
        *,
        logger: logging.Logger | None = None,
        workers: int = 1,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        structure : Structure
            Skeleton produced by :func:`wgen.discover.collect_from`.
        logger : logging.Logger, optional
            Receives progress messages and warnings for dropped nodes.
        workers : int, optional
            Number of threads resolving sections concurrently. ``1`` (the
            default) resolves them sequentially.
        """
        self.structure = structure
        self.root = structure.root
        self.log = logger or _LOGGER
        self.workers = max(1, workers)

    def run(self) -> Tree:
        """Read every spec file and return the assembled tree.

        Raises
        ------
        ManifestError
            If the root manifest cannot be read or decoded.
        """
        self.log.info("Reading %s", self.structure.manifest)
        manifest = read_manifest(self.structure.manifest)

        sections = self._resolve_sections(self.structure.sections)
        pages = [page_from_spec(spec, self.root, self.root) for spec in manifest.pages]
        self.log.debug("Found %d pages in %s", len(pages), self.root)
        entries: list[TreeEntry] = [*sections, *pages]

        return Tree(
            root=self.root,
            title=manifest.title,
            append_title=manifest.append_title,
            href_prefix=manifest.href_prefix,
            footer_content=manifest.footer_content,
            main_page=main_page(manifest.main_page_path, manifest.title, self.root),
            entries=tuple(entries),
        )

    def _resolve_sections(
        self, skeletons: cabc.Sequence[SectionSkeleton]
    ) -> list[Section]:
        if self.workers == 1 or len(skeletons) < 2:
            outcomes = [_attempt(self.resolve_section, s) for s in skeletons]
        else:
            # map() yields in submission order, whatever order threads finish in.
            with cf.ThreadPoolExecutor(max_workers=self.workers) as executor:
                outcomes = list(
                    executor.map(lambda s: _attempt(self.resolve_section, s), skeletons)
                )
        return _keep_resolved(outcomes, self.log)

    def resolve_section(self, skeleton: SectionSkeleton) -> Section:
        """Parse a section spec and attach its subsections, then its pages.

        Raises
        ------
        SpecFileError
            If ``section.toml`` cannot be read or decoded.
        """
        self.log.info("Reading section specfile %s", skeleton.spec)
        spec = read_section_spec(skeleton.spec)
        location = skeleton.location

        subsections = _keep_resolved(
            (_attempt(self.resolve_subsection, s) for s in skeleton.subsections),
            self.log,
        )
        pages = [page_from_spec(p, location, self.root) for p in spec.pages]
        self.log.debug("Found %d pages in %s", len(pages), location)
        entries: list[SectionEntry] = [*subsections, *pages]

        return Section(
            name=spec.name,
            desc=spec.desc,
            path=location,
            href=derive_href(location, self.root, directory=True),
            entries=tuple(entries),
        )

    def resolve_subsection(self, skeleton: SubsectionSkeleton) -> Subsection:
        """Parse a subsection spec and resolve its pages.

        Raises
        ------
        SpecFileError
            If ``subsection.toml`` cannot be read or decoded.
        """
        self.log.info("Reading subsection specfile %s", skeleton.spec)
        spec = read_subsection_spec(skeleton.spec)
        location = skeleton.location
        pages: list[Page] = [
            page_from_spec(p, location, self.root) for p in spec.pages
        ]
        self.log.debug("Found %d pages in %s", len(pages), location)
        return Subsection(
            name=spec.name,
            desc=spec.desc,
            path=location,
            href=derive_href(location, self.root, directory=True),
            pages=tuple(pages),
        )


def build_tree(
    structure: Structure,
    *,
    logger: logging.Logger | None = None,
    workers: int = 1,
) -> Tree:
    """Assemble ``structure`` into a :class:`Tree`.

    Parameters
    ----------
    structure : Structure
        Skeleton from :func:`wgen.discover.collect_from`.
    logger : logging.Logger, optional
        Receives progress messages and one warning per dropped node.
    workers : int, optional
        Threads used to resolve sections; results keep skeleton order.

    Returns
    -------
    Tree
        Fully resolved, read-only site tree.

    Raises
    ------
    ManifestError
        If the root manifest cannot be read or decoded.
    """
    return TreeBuilder(structure, logger=logger, workers=workers).run()


def load_tree(
    root: Path, *, logger: logging.Logger | None = None, workers: int = 1
) -> Tree:
    """Discover ``root`` and assemble it in one call."""
    return build_tree(collect_from(root, logger=logger), logger=logger, workers=workers)


__all__ = ["TreeBuilder", "build_tree", "load_tree"]
