"""Common literal values used across wgen.

These constants keep the authoring format's file names, the rendered output
suffix, and the date formatting in one place so discovery, assembly, the
renderer, and tests agree on them. Intended for internal use within the wgen
package.

Examples
--------
>>> from wgen import _constants
>>> _constants.MANIFEST_FILENAME
'manifest.toml'
>>> _constants.UNKNOWN_DATE
'Unknown'
"""

MANIFEST_FILENAME = "manifest.toml"
SECTION_FILENAME = "section.toml"
SUBSECTION_FILENAME = "subsection.toml"

RENDERED_SUFFIX = ".html"
INDEX_FILENAME = "index.html"
SIDEBAR_FILENAME = "sidebar.html"

# Day carries no leading zero, so it is formatted separately.
DATE_TAIL_FORMAT = "%m.%Y %H:%M"
UNKNOWN_DATE = "Unknown"
