"""Sample term.html and dependency payloads used across the tests."""

from pathlib import Path

from term_deps.injection import DEFAULT_TASKS

TERM_HTML = """<!DOCTYPE html>
<html>
  <head>
    <style>
    /* term-css-start */
    /* term-css-end */
    </style>
  </head>
  <body>
    <div id="terminal"></div>
    <script>
    /* term-js-start */
    /* term-js-end */
    </script>
    <script>
    /* term-attach-start */
    /* term-attach-end */
    </script>
    <script>
    /* term-fit-start */
    /* term-fit-end */
    </script>
  </body>
</html>
"""

PAYLOADS = {
    "css": ".xterm { position: relative; }\n.xterm-viewport { overflow-y: scroll; }\n",
    "xterm": "!function(e,t){\"object\"==typeof exports&&(module.exports=t())}(self,function(){});\n",
    "attach": "/* attach */ var AttachAddon = {};\n",
    "fit": "/* fit */ var FitAddon = {};\n",
}


def write_dependencies(deps_dir: Path, payloads=None):
    """Lay out the node_modules files for every default task."""
    payloads = payloads or PAYLOADS
    for task in DEFAULT_TASKS:
        target = task.resolve(deps_dir)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(payloads[task.name])
