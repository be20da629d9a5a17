"""Resolve a discovered content tree into the site document model.

The model is a strict three-level hierarchy: a :class:`Tree` owns sections and
root pages, a :class:`Section` owns subsections and pages, and a
:class:`Subsection` owns pages. Every entity carries a site-rooted ``href``;
pages also carry the formatted modification date of their markdown source.
Use :func:`build_tree` on the skeleton returned by
:func:`wgen.discover.collect_from`, or :func:`load_tree` to do both.
"""

from .builder import TreeBuilder, build_tree, load_tree
from .helpers import derive_date, derive_href, format_date
from .models import (
    Page,
    Section,
    SectionEntry,
    SiteContext,
    Subsection,
    Tree,
    TreeEntry,
)

__all__ = [
    "Page",
    "Section",
    "SectionEntry",
    "SiteContext",
    "Subsection",
    "Tree",
    "TreeBuilder",
    "TreeEntry",
    "build_tree",
    "derive_date",
    "derive_href",
    "format_date",
    "load_tree",
]
