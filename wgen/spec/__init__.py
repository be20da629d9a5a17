"""Parse the per-directory spec files of a wgen content tree.

A content tree carries ``manifest.toml`` at its root, ``section.toml`` in each
section directory, and ``subsection.toml`` in each subsection directory. This
subpackage decodes those files into frozen records (:class:`ManifestSpec`,
:class:`SectionSpec`, :class:`SubsectionSpec`) holding names, descriptions,
and the declared pages with their paths still relative to the declaring
directory. Nothing here touches hrefs or modification dates; that happens
during tree assembly.

Examples
--------
>>> from pathlib import Path
>>> from wgen.spec import read_section_spec
>>> spec = read_section_spec(Path("site/guides/section.toml"))  # doctest: +SKIP
>>> [page.relative_path for page in spec.pages]  # doctest: +SKIP
['1.md', '2.md']
"""

from .loader import read_manifest, read_section_spec, read_subsection_spec
from .models import (
    HeaderSpec,
    ManifestSpec,
    PageSpec,
    SectionSpec,
    SubsectionSpec,
)

__all__ = [
    "HeaderSpec",
    "ManifestSpec",
    "PageSpec",
    "SectionSpec",
    "SubsectionSpec",
    "read_manifest",
    "read_section_spec",
    "read_subsection_spec",
]
