"""Shared fixtures building content trees on disk for wgen tests.

``site_root`` lays out a two-section site under ``tmp_path / "spec2"``::

    spec2/
      manifest.toml  index.md  1.md  2.md
      d1/ section.toml 1.md 2.md
          s1/ subsection.toml 1.md 2.md
          s2/ subsection.toml 1.md 2.md
      d2/ section.toml 1.md 2.md
          s1/ subsection.toml 1.md

Every markdown file gets the modification time ``FIXED_MTIME`` so rendered
dates are predictable.
"""

from __future__ import annotations

import datetime as dt
import os
from pathlib import Path
from textwrap import dedent

import pytest

FIXED_MTIME = dt.datetime(2025, 9, 1, 20, 34, tzinfo=dt.UTC)
FIXED_DATE = "1.09.2025 20:34"

MANIFEST = """
title = "WGEN Webpage"
main_page = "index.md"
footer_content = "&copy; lysolaka. Contact me at <a href='mailto:me@example.invalid'>mail</a>"
href_prepend = "/~home"

[[page]]
name = "First page 1.md"
desc = "Generic description"
path = "1.md"

[[page]]
name = "Second page in the root"
path = "2.md"
"""

SECTION_D1 = """
[[page]]
name = "one MD"
desc = "The first page here"
path = "1.md"

[[page]]
name = "2nd markdown"
path = "2.md"

[section]
name = "D1 section"
desc = "First section"
"""

SECTION_D2 = """
[section]
name = "D2 section"
desc = "Second section"

[[page]]
name = "one MD"
desc = "The first page here"
path = "1.md"

[[page]]
name = "2nd markdown"
path = "2.md"
"""

SUBSECTION_D1_S1 = """
[subsection]
name = "S1 subsection"
desc = "First subsection"

[[page]]
name = "1 MD"
desc = "The first page here"
path = "1.md"

[[page]]
name = "2nd md"
path = "2.md"
"""

SUBSECTION_D1_S2 = """
[subsection]
name = "S2 sub"

[[page]]
name = "1 EMDE"
desc = "A page"
path = "1.md"

[[page]]
name = "second md"
path = "2.md"
"""

SUBSECTION_D2_S1 = """
[subsection]
name = "d2/S1 subsection"
desc = "Only subsection of d2"

[[page]]
name = "1 MD"
desc = "The first and only page here"
path = "1.md"
"""


def write_file(path: Path, text: str) -> Path:
    """Write dedented ``text`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(text).lstrip(), encoding="utf-8")
    return path


def write_markdown(path: Path, title: str) -> Path:
    """Write a small markdown page and pin its modification time."""
    write_file(path, f"# {title}\n\nSome *text* for {title}.\n")
    stamp = FIXED_MTIME.timestamp()
    os.utime(path, (stamp, stamp))
    return path


def build_site(root: Path) -> Path:
    """Lay out the two-section fixture site under ``root``."""
    write_file(root / "manifest.toml", MANIFEST)
    write_markdown(root / "index.md", "Welcome")
    for name in ("1.md", "2.md"):
        write_markdown(root / name, f"root {name}")

    write_file(root / "d1" / "section.toml", SECTION_D1)
    write_file(root / "d1" / "s1" / "subsection.toml", SUBSECTION_D1_S1)
    write_file(root / "d1" / "s2" / "subsection.toml", SUBSECTION_D1_S2)
    write_file(root / "d2" / "section.toml", SECTION_D2)
    write_file(root / "d2" / "s1" / "subsection.toml", SUBSECTION_D2_S1)
    for section in ("d1", "d2"):
        for name in ("1.md", "2.md"):
            write_markdown(root / section / name, f"{section} {name}")
    for subsection in ("d1/s1", "d1/s2"):
        for name in ("1.md", "2.md"):
            write_markdown(root / subsection / name, f"{subsection} {name}")
    write_markdown(root / "d2" / "s1" / "1.md", "d2/s1 1.md")
    return root


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Return the root of a freshly written two-section fixture site."""
    return build_site(tmp_path / "spec2")
