"""Read spec files from disk into typed records."""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.toml as msgspec_toml

from wgen.errors import ManifestError, SpecFileError

from .models import ManifestSpec, SectionSpec, SubsectionSpec

if typ.TYPE_CHECKING:
    from pathlib import Path

SpecT = typ.TypeVar("SpecT", ManifestSpec, SectionSpec, SubsectionSpec)

_READ_ERRORS = (OSError, UnicodeDecodeError, msgspec.MsgspecError)


def _decode(path: Path, spec_type: type[SpecT]) -> SpecT:
    """Decode the TOML file at ``path`` into ``spec_type``."""
    text = path.read_text(encoding="utf-8")
    return msgspec_toml.decode(text, type=spec_type)


def read_manifest(path: Path) -> ManifestSpec:
    """Load the root ``manifest.toml``.

    Parameters
    ----------
    path : Path
        Location of the manifest file.

    Returns
    -------
    ManifestSpec
        Decoded manifest with defaults applied to optional keys.

    Raises
    ------
    ManifestError
        If the file cannot be read, is not valid TOML, or is missing a
        required key (``title``, ``main_page``, or a page's ``name``/``path``).

    Examples
    --------
    >>> from pathlib import Path
    >>> spec = read_manifest(Path("site/manifest.toml"))  # doctest: +SKIP
    >>> spec.main_page_path  # doctest: +SKIP
    'index.md'
    """
    try:
        return _decode(path, ManifestSpec)
    except _READ_ERRORS as exc:
        msg = f"Could not read the manifest {path}: {exc}"
        raise ManifestError(msg) from exc


def read_section_spec(path: Path) -> SectionSpec:
    """Load a ``section.toml``; failures raise :class:`SpecFileError`."""
    try:
        return _decode(path, SectionSpec)
    except _READ_ERRORS as exc:
        raise SpecFileError(path, str(exc)) from exc


def read_subsection_spec(path: Path) -> SubsectionSpec:
    """Load a ``subsection.toml``; failures raise :class:`SpecFileError`."""
    try:
        return _decode(path, SubsectionSpec)
    except _READ_ERRORS as exc:
        raise SpecFileError(path, str(exc)) from exc


__all__ = ["read_manifest", "read_section_spec", "read_subsection_spec"]
