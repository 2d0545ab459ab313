"""Marker comments and default locations for dependency injection.

Each dependency owns one start/end comment pair inside term.html. The pair
must appear exactly once, start before end; the text between them is
generated and replaced on every injection run.
"""

# Style sheet markers
CSS_MARKER_START = "/* term-css-start */"
CSS_MARKER_END = "/* term-css-end */"

# Script markers
XTERM_MARKER_START = "/* term-js-start */"
XTERM_MARKER_END = "/* term-js-end */"
ATTACH_MARKER_START = "/* term-attach-start */"
ATTACH_MARKER_END = "/* term-attach-end */"
FIT_MARKER_START = "/* term-fit-start */"
FIT_MARKER_END = "/* term-fit-end */"

# Indentation placed before the end marker so it lines up inside <style>/<script>
END_MARKER_INDENT = "    "

# Default locations, relative to scripts/term_deps where the tool is run from
DEFAULT_HTML_PATH = "../term.html"
DEFAULT_DEPS_DIR = "./node_modules"
CONFIG_FILENAME = "term-deps.yml"

FILE_ENCODING = "utf-8"
