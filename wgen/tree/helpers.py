"""Path, href, and date derivation shared by tree assembly."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path, PurePosixPath

from wgen._constants import DATE_TAIL_FORMAT, RENDERED_SUFFIX, UNKNOWN_DATE
from wgen.errors import MetadataUnavailableError

from .models import Page

if typ.TYPE_CHECKING:
    from wgen.spec import PageSpec


def _site_relative(path: Path, root: Path) -> PurePosixPath:
    """Return ``path`` relative to ``root``, or ``path`` itself when outside it."""
    try:
        relative = path.relative_to(root)
    except ValueError:
        relative = path
    return PurePosixPath(relative.as_posix())


def derive_href(path: Path, root: Path, *, directory: bool = False) -> str:
    """Return the site-rooted href for a page source or an index directory.

    Parameters
    ----------
    path : Path
        Markdown source (``directory=False``) or section/subsection directory.
    root : Path
        Content root stripped from the front of ``path``.
    directory : bool, optional
        When true the href gets a trailing slash; otherwise the source suffix
        is replaced with ``.html``.

    Returns
    -------
    str
        Href starting with ``/``.

    Examples
    --------
    >>> derive_href(Path("in/s1/post.md"), Path("in"))
    '/s1/post.html'
    >>> derive_href(Path("in/s1"), Path("in"), directory=True)
    '/s1/'
    """
    relative = _site_relative(path, root)
    if directory:
        text = str(relative).strip("/")
        return f"/{text}/" if text and text != "." else "/"
    if relative.name:
        relative = relative.with_suffix(RENDERED_SUFFIX)
    return f"/{str(relative).lstrip('/')}"


def _read_mtime(path: Path) -> dt.datetime:
    """Return the UTC modification time of ``path``."""
    try:
        stamp = path.stat().st_mtime
        return dt.datetime.fromtimestamp(stamp, tz=dt.UTC)
    except (OSError, OverflowError, ValueError) as exc:
        msg = f"no modification time for {path}: {exc}"
        raise MetadataUnavailableError(msg) from exc


def format_date(moment: dt.datetime) -> str:
    """Format ``moment`` as ``day.month.year hour:minute``.

    >>> format_date(dt.datetime(2025, 9, 1, 20, 34, tzinfo=dt.UTC))
    '1.09.2025 20:34'
    """
    return f"{moment.day}.{moment.strftime(DATE_TAIL_FORMAT)}"


def derive_date(path: Path) -> str:
    """Return the formatted mtime of ``path`` or ``"Unknown"``."""
    try:
        return format_date(_read_mtime(path))
    except MetadataUnavailableError:
        return UNKNOWN_DATE


def page_from_spec(spec: PageSpec, location: Path, root: Path) -> Page:
    """Resolve a declared page against the directory that declares it."""
    path = location / spec.relative_path
    return Page(
        name=spec.name,
        desc=spec.desc,
        path=path,
        href=derive_href(path, root),
        date=derive_date(path),
    )


def main_page(relative_path: str, title: str, root: Path) -> Page:
    """Build the home page; its href is always ``/``."""
    path = root / relative_path
    return Page(name=title, desc="", path=path, href="/", date=derive_date(path))


__all__ = [
    "derive_date",
    "derive_href",
    "format_date",
    "main_page",
    "page_from_spec",
]
