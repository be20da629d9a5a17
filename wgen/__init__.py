"""A very limited static website generator.

wgen reads a content tree made of a root ``manifest.toml``, section
directories with ``section.toml``, and subsection directories with
``subsection.toml``, assembles it into an immutable three-level document
model, and renders that model to static HTML.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``collect_from``: Discover the skeleton of a content tree.
- ``build_tree``: Assemble a discovered skeleton into a ``Tree``.

Examples
--------
>>> from pathlib import Path
>>> from wgen import build_tree, collect_from
>>> tree = build_tree(collect_from(Path("site")))  # doctest: +SKIP
>>> [section.href for section in tree.sections()]  # doctest: +SKIP
['/d1/', '/d2/']
"""

from __future__ import annotations

from .cli import app, main
from .discover import collect_from
from .tree import build_tree

__all__ = ["app", "build_tree", "collect_from", "main"]
