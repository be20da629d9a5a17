"""Cyclopts CLI entrypoint for building wgen sites.

The ``wgen`` console script discovers a content tree, assembles it, and hands
it to the renderer. ``wgen tree`` prints the assembled model as JSON instead
of rendering it, which is handy for checking ordering and hrefs. Every option
can also be supplied through a ``WGEN_``-prefixed environment variable.

Examples
--------
Build the site below ``site`` into ``public``:

>>> from wgen.cli import app
>>> app(["build", "--root", "site", "--output-dir", "public"])  # doctest: +SKIP

Inspect the tree without rendering:

>>> app(["tree", "--root", "site"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .errors import DiscoveryError, ManifestError, WgenError
from .render import SiteRenderer
from .tree import Page, Section, Subsection, load_tree

DEFAULT_ROOT = Path("site")
DEFAULT_OUTPUT_DIR = Path("public")

app = App(name="wgen", config=cyclopts.config.Env("WGEN_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _encode_path(value: object) -> object:
    if isinstance(value, Path):
        return value.as_posix()
    msg = f"Cannot encode objects of type {type(value).__name__}"
    raise NotImplementedError(msg)


def _fields(node: Page | Section | Subsection, *skip: str) -> dict[str, object]:
    return {
        field.name: getattr(node, field.name)
        for field in dc.fields(node)
        if field.name not in skip
    }


def _tagged(node: Page | Section | Subsection) -> dict[str, object]:
    """Return ``node`` as a mapping whose ``type`` key names its variant."""
    match node:
        case Section():
            children = [_tagged(entry) for entry in node]
            return {"type": "Section", **_fields(node, "entries"), "entries": children}
        case Subsection():
            children = [_tagged(page) for page in node]
            return {"type": "Subsection", **_fields(node, "pages"), "pages": children}
        case Page():
            return {"type": "Page", **_fields(node)}


@app.command(help="Render the content tree into static HTML.")
def build(
    *,
    root: typ.Annotated[
        Path, Parameter(help="Directory holding manifest.toml", env_var="WGEN_ROOT")
    ] = DEFAULT_ROOT,
    output_dir: typ.Annotated[
        Path,
        Parameter(help="Where rendered files are written", env_var="WGEN_OUTPUT_DIR"),
    ] = DEFAULT_OUTPUT_DIR,
    workers: typ.Annotated[
        int, Parameter(help="Threads used to assemble sections", env_var="WGEN_WORKERS")
    ] = 1,
    verbose: typ.Annotated[bool, Parameter(help="Log debug messages")] = False,
) -> None:
    """Discover, assemble, and render the site.

    Parameters
    ----------
    root : Path, optional
        Content root containing ``manifest.toml``; defaults to ``site``.
    output_dir : Path, optional
        Output directory for the rendered site; defaults to ``public``.
    workers : int, optional
        Number of threads resolving sections; ``1`` keeps assembly sequential.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    SystemExit
        With status 1 when the root manifest is missing or invalid, or when
        a page cannot be rendered.
    """
    _configure_logging(verbose=verbose)
    try:
        tree = load_tree(root, workers=workers)
        written = SiteRenderer(tree).run(output_dir)
    except WgenError as exc:
        logging.getLogger(__name__).error("%s", exc)
        raise SystemExit(1) from exc
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the assembled tree as JSON.")
def tree(
    *,
    root: typ.Annotated[
        Path, Parameter(help="Directory holding manifest.toml", env_var="WGEN_ROOT")
    ] = DEFAULT_ROOT,
    verbose: typ.Annotated[bool, Parameter(help="Log debug messages")] = False,
) -> None:
    """Assemble the site and write its JSON form to stdout."""
    _configure_logging(verbose=verbose)
    try:
        site = load_tree(root)
    except (DiscoveryError, ManifestError) as exc:
        logging.getLogger(__name__).error("%s", exc)
        raise SystemExit(1) from exc
    payload = {
        "context": site.context(),
        "main_page": _tagged(site.main_page),
        "entries": [_tagged(entry) for entry in site],
    }
    print(msgspec_json.format(msgspec_json.encode(payload, enc_hook=_encode_path)).decode())


def main() -> None:
    """Invoke the Cyclopts application that powers the ``wgen`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
