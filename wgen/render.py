"""Render an assembled :class:`~wgen.tree.Tree` into static HTML.

The renderer is the collaborator that receives the finished tree. It turns
markdown sources into HTML with Python-Markdown (Pygments highlighting for
fenced code; strikethrough, autolinks, task lists and math from
``pymdown-extensions``), fills the Jinja templates shipped in
``wgen/templates``, and writes one file per href under the output directory:

* ``<outdir>/<section href>/index.html`` and
  ``<outdir>/<subsection href>/index.html`` list the entries of each index;
* ``<outdir>/<page href>`` holds each rendered page;
* ``<outdir>/index.html`` holds the main page;
* ``sidebar.html``, ``style.css`` and ``script.js`` sit at the output root.

Examples
--------
>>> from pathlib import Path
>>> from wgen.tree import load_tree
>>> from wgen.render import SiteRenderer
>>> tree = load_tree(Path("site"))  # doctest: +SKIP
>>> written = SiteRenderer(tree).run(Path("public"))  # doctest: +SKIP
>>> written[-1]  # doctest: +SKIP
PosixPath('public/script.js')
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from ._constants import INDEX_FILENAME, SIDEBAR_FILENAME
from .errors import RenderError
from .tree import Page, Section, Subsection

if typ.TYPE_CHECKING:
    from jinja2 import Template

    from .tree import Tree

_LOGGER = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


class MarkdownRenderer:
    """Render markdown into HTML with highlighted code blocks."""

    def __init__(self, pygments_style: str = "default") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=[
                "fenced_code",
                "codehilite",
                "tables",
                "sane_lists",
                "footnotes",
                "pymdownx.tilde",
                "pymdownx.magiclink",
                "pymdownx.tasklist",
                "pymdownx.arithmatex",
            ],
            extension_configs={
                "pymdownx.arithmatex": {"generic": True},
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
            output_format="html",
        )
        return md.convert(text)


def is_page(value: object) -> bool:
    return isinstance(value, Page)


def is_section(value: object) -> bool:
    return isinstance(value, Section)


def is_subsection(value: object) -> bool:
    return isinstance(value, Subsection)


def is_empty(value: object) -> bool:
    return not value


class SiteRenderer:
    """Write every index, page, and shared asset of a tree to disk."""

    def __init__(
        self,
        tree: Tree,
        *,
        templates_dir: Path | None = None,
        markdown_renderer: MarkdownRenderer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        tree : Tree
            Assembled site tree; read, never modified.
        templates_dir : Path, optional
            Directory holding the Jinja templates and static assets. Defaults
            to ``wgen/templates``.
        markdown_renderer : MarkdownRenderer, optional
            Converter used for page bodies.
        logger : logging.Logger, optional
            Receives one progress message per written file.
        """
        self.tree = tree
        self.context = tree.context()
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.markdown = markdown_renderer or MarkdownRenderer()
        self.log = logger or _LOGGER
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.tests.update(
            page=is_page,
            section=is_section,
            subsection=is_subsection,
            empty=is_empty,
        )

    def run(self, outdir: Path) -> list[Path]:
        """Render the whole site into ``outdir`` and return the written paths.

        Raises
        ------
        RenderError
            If a page's markdown source cannot be read.
        """
        outdir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        written.extend(self.render_sections(outdir))
        written.extend(self.render_subsections(outdir))
        written.extend(self.render_pages(outdir))
        written.append(self.render_sidebar(outdir))
        written.append(self.render_main_page(outdir))
        written.extend(self.write_assets(outdir))
        return written

    def render_sections(self, outdir: Path) -> list[Path]:
        template = self.env.get_template("section_index.jinja")
        sections = list(self.tree.sections())
        written: list[Path] = []
        for index, section in enumerate(sections, start=1):
            output_path = _href_to_path(outdir, section.href) / INDEX_FILENAME
            self.log.info(
                "[%d/%d] Rendering section index to %s",
                index,
                len(sections),
                output_path,
            )
            html = template.render(ctx=self.context, sec=section)
            written.append(_write(output_path, html))
        return written

    def render_subsections(self, outdir: Path) -> list[Path]:
        template = self.env.get_template("subsection_index.jinja")
        subsections = list(self.tree.subsections())
        written: list[Path] = []
        for index, subsection in enumerate(subsections, start=1):
            output_path = _href_to_path(outdir, subsection.href) / INDEX_FILENAME
            self.log.info(
                "[%d/%d] Rendering subsection index to %s",
                index,
                len(subsections),
                output_path,
            )
            html = template.render(ctx=self.context, sec=subsection)
            written.append(_write(output_path, html))
        return written

    def render_pages(self, outdir: Path) -> list[Path]:
        template = self.env.get_template("content.jinja")
        pages = list(self.tree.pages())
        written: list[Path] = []
        for index, page in enumerate(pages, start=1):
            output_path = _href_to_path(outdir, page.href)
            self.log.info(
                "[%d/%d] Rendering %s to %s", index, len(pages), page.path, output_path
            )
            written.append(self._render_page(template, page, output_path))
        return written

    def render_main_page(self, outdir: Path) -> Path:
        template = self.env.get_template("content.jinja")
        output_path = outdir / INDEX_FILENAME
        self.log.info("Rendering main page to %s", output_path)
        return self._render_page(template, self.tree.main_page, output_path)

    def render_sidebar(self, outdir: Path) -> Path:
        template = self.env.get_template("sidebar.jinja")
        output_path = outdir / SIDEBAR_FILENAME
        self.log.info("Rendering sidebar to %s", output_path)
        html = template.render(ctx=self.context, tree=self.tree)
        return _write(output_path, html)

    def write_assets(self, outdir: Path) -> list[Path]:
        """Copy the stylesheet (with Pygments rules) and script to ``outdir``."""
        style = (self.templates_dir / "style.css").read_text(encoding="utf-8")
        style_path = _write(outdir / "style.css", f"{style}\n{self.markdown.stylesheet}")
        script = (self.templates_dir / "script.js").read_text(encoding="utf-8")
        script_path = _write(outdir / "script.js", script)
        self.log.info("Writing style.css and script.js to %s", outdir)
        return [style_path, script_path]

    def _render_page(self, template: Template, page: Page, output_path: Path) -> Path:
        try:
            source = page.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Could not read page source {page.path}: {exc}"
            raise RenderError(msg) from exc
        html = template.render(
            ctx=self.context,
            page=page,
            page_content=self.markdown.markdown(source),
        )
        return _write(output_path, html)


def _href_to_path(outdir: Path, href: str) -> Path:
    """Map a site-rooted href onto the output directory."""
    return outdir.joinpath(*[part for part in href.split("/") if part])


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not text.endswith("\n"):
        text += "\n"
    path.write_text(text, encoding="utf-8")
    return path


__all__ = [
    "MarkdownRenderer",
    "SiteRenderer",
    "is_empty",
    "is_page",
    "is_section",
    "is_subsection",
]
