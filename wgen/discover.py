"""Walk a content root and record which directories form the site skeleton.

Discovery is a pure existence and shape check. It confirms that the root holds
a ``manifest.toml``, that each immediate subdirectory holds a
``section.toml``, and that each directory below a section holds a
``subsection.toml``. Directories failing those checks are skipped with a
warning; only a missing root manifest is fatal. No spec file is parsed here,
so a missing spec (caught here) stays distinguishable from a malformed one
(caught during assembly).

Sibling directories are visited in lexicographic order of their names so two
runs over the same tree yield the same skeleton on any filesystem.

Examples
--------
>>> from pathlib import Path
>>> from wgen.discover import collect_from
>>> structure = collect_from(Path("site"))  # doctest: +SKIP
>>> [s.location.name for s in structure.sections]  # doctest: +SKIP
['guides', 'projects']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from ._constants import MANIFEST_FILENAME, SECTION_FILENAME, SUBSECTION_FILENAME
from .errors import DiscoveryError, MissingSpecError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_LOGGER = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class SubsectionSkeleton:
    """Path to a validated ``subsection.toml``."""

    spec: Path

    @property
    def location(self) -> Path:
        return self.spec.parent


@dc.dataclass(frozen=True, slots=True)
class SectionSkeleton:
    """Path to a validated ``section.toml`` and its subsections."""

    spec: Path
    subsections: tuple[SubsectionSkeleton, ...] = ()

    @property
    def location(self) -> Path:
        return self.spec.parent


@dc.dataclass(frozen=True, slots=True)
class Structure:
    """Unparsed skeleton of a content tree, consumed once by assembly.

    Attributes
    ----------
    root : Path
        Content root as given by the caller; every other path is joined to it.
    sections : tuple[SectionSkeleton, ...]
        Validated sections in directory-name order.
    """

    root: Path
    sections: tuple[SectionSkeleton, ...] = ()

    @property
    def manifest(self) -> Path:
        return self.root / MANIFEST_FILENAME


def collect_from(root: Path, *, logger: logging.Logger | None = None) -> Structure:
    """Validate and enumerate the directory structure below ``root``.

    Parameters
    ----------
    root : Path
        Directory containing ``manifest.toml``.
    logger : logging.Logger, optional
        Receives progress messages and one warning per skipped directory.
        Defaults to this module's logger.

    Returns
    -------
    Structure
        Skeleton listing every section and subsection spec file found.

    Raises
    ------
    DiscoveryError
        If ``root/manifest.toml`` is absent, is not a regular file, or cannot
        be accessed.
    """
    log = logger or _LOGGER
    log.info("Collecting entries from root at %s", root)
    manifest = root / MANIFEST_FILENAME
    try:
        found = manifest.is_file()
    except OSError as exc:
        msg = f"cannot access {manifest}: {exc}"
        raise DiscoveryError(msg) from exc
    if not found:
        msg = f"no {MANIFEST_FILENAME} found in {root}, aborting"
        raise DiscoveryError(msg)

    sections: list[SectionSkeleton] = []
    for path in _child_directories(root, log):
        try:
            sections.append(_collect_section(path, log))
        except MissingSpecError as exc:
            log.warning("Skipping %s: %s", path, exc.reason)
    return Structure(root=root, sections=tuple(sections))


def _collect_section(directory: Path, log: logging.Logger) -> SectionSkeleton:
    """Return the skeleton of a section directory and its subsections."""
    log.info("Entering directory %s", directory)
    spec = _require_spec(directory, SECTION_FILENAME)

    subsections: list[SubsectionSkeleton] = []
    for path in _child_directories(directory, log):
        try:
            subsections.append(_collect_subsection(path, log))
        except MissingSpecError as exc:
            log.warning("Skipping %s: %s", path, exc.reason)
    return SectionSkeleton(spec=spec, subsections=tuple(subsections))


def _collect_subsection(directory: Path, log: logging.Logger) -> SubsectionSkeleton:
    """Return the skeleton of a subsection directory."""
    log.info("Entering subdirectory %s", directory)
    return SubsectionSkeleton(spec=_require_spec(directory, SUBSECTION_FILENAME))


def _require_spec(directory: Path, filename: str) -> Path:
    """Return ``directory / filename`` or raise :class:`MissingSpecError`.

    A spec file that cannot be stat'ed counts as missing.
    """
    spec = directory / filename
    try:
        found = spec.is_file()
    except OSError as exc:
        raise MissingSpecError(directory, str(exc)) from exc
    if not found:
        raise MissingSpecError(directory, f"{filename} not found or is not a file")
    return spec


def _child_directories(directory: Path, log: logging.Logger) -> cabc.Iterator[Path]:
    """Yield immediate subdirectories of ``directory`` sorted by name.

    A directory that cannot be listed yields nothing; entries whose type
    cannot be determined are skipped. Both cases are logged as warnings.
    """
    try:
        children = sorted(directory.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        log.warning("Could not list %s: %s", directory, exc)
        return
    for child in children:
        try:
            is_dir = child.is_dir()
        except OSError as exc:
            log.warning("Skipping %s: %s", child, exc)
            continue
        if is_dir:
            yield child


__all__ = [
    "SectionSkeleton",
    "Structure",
    "SubsectionSkeleton",
    "collect_from",
]
