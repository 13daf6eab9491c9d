"""Generate a self-contained flamegraph page for a collapsed-stack profile.

The page embeds the call tree JSON inside a ``<script>`` tag and draws it
with d3-flame-graph loaded from a CDN.  Node values are cumulative, so the
chart is configured with ``selfValue(false)``.
"""

import html
import re
from pathlib import Path
from typing import Iterable, Optional

from ..collapse import build_tree, sort_lines, tree_to_json
from ..config import FlameConfig
from ..exceptions import FileAccessError
from ..logging_config import get_logger

logger = get_logger(__name__)

_PLACEHOLDER = re.compile(r"\{(stack|title|width|cell_height|min_frame_size)\}")


def render_page(
    data_json: str,
    title: str = "flamefold",
    config: Optional[FlameConfig] = None,
) -> str:
    """Substitute the tree JSON and title into the page template.

    All placeholders are replaced in a single pass, so placeholder-like
    text inside *data_json* or *title* is emitted literally.
    """
    config = config or FlameConfig()
    values = {
        # "</" would end the script block early; "<\/" is the same JSON string
        "stack": data_json.replace("</", "<\\/"),
        "title": html.escape(title),
        "width": str(config.width),
        "cell_height": str(config.cell_height),
        "min_frame_size": str(config.min_frame_size),
    }
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], HTML_TEMPLATE)


def generate_page(
    lines: Iterable[str],
    output_path: str = "flamegraph.html",
    config: Optional[FlameConfig] = None,
) -> str:
    """Build the call tree for *lines* and write it as a flamegraph page.

    Parameters
    ----------
    lines:
        Collapsed-stack lines.  Sorted first when ``config.sort_input`` is set.
    output_path:
        Where to write the HTML file.
    config:
        Rendering and input options; defaults to ``FlameConfig()``.

    Returns
    -------
    str
        Absolute path to the generated HTML file.
    """
    config = config or FlameConfig()
    if config.sort_input:
        lines = sort_lines(lines)

    tree = build_tree(lines, skip_comments=config.skip_comments)
    page = render_page(tree_to_json(tree), title=config.title, config=config)

    out = Path(output_path).resolve()
    try:
        out.write_text(page, encoding="utf-8")
    except OSError as e:
        raise FileAccessError(out, e.strerror or str(e)) from e

    logger.info("Wrote flamegraph page for %d samples to %s", tree.total, out)
    return str(out)


HTML_TEMPLATE = r"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <link rel="stylesheet" href="https://maxcdn.bootstrapcdn.com/bootstrap/3.3.7/css/bootstrap.min.css">
    <link rel="stylesheet" type="text/css" href="https://cdn.jsdelivr.net/gh/spiermar/d3-flame-graph@2.0.3/dist/d3-flamegraph.css">
    <style>
    body {
      padding-top: 20px;
      padding-bottom: 20px;
    }
    .header {
      padding-bottom: 20px;
      padding-right: 15px;
      padding-left: 15px;
      border-bottom: 1px solid #e5e5e5;
    }
    .header h3 {
      margin-top: 0;
      margin-bottom: 0;
      line-height: 40px;
    }
    .container {
      max-width: 990px;
    }
    </style>
    <title>{title}</title>
  </head>
  <body>
    <div class="container">
      <div class="header clearfix">
        <nav>
          <div class="pull-right">
            <form class="form-inline" id="form">
              <a class="btn" href="javascript: resetZoom();">Reset zoom</a>
              <a class="btn" href="javascript: clear();">Clear</a>
              <div class="form-group">
                <input type="text" class="form-control" id="term">
              </div>
              <a class="btn btn-primary" href="javascript: search();">Search</a>
            </form>
          </div>
        </nav>
        <h3 class="text-muted">{title}</h3>
      </div>
      <div id="chart">
      </div>
      <hr>
      <div id="details">
      </div>
    </div>

    <script src="https://d3js.org/d3.v4.min.js" charset="utf-8"></script>
    <script type="text/javascript" src="https://cdnjs.cloudflare.com/ajax/libs/d3-tip/0.9.1/d3-tip.min.js"></script>
    <script type="text/javascript" src="https://cdn.jsdelivr.net/gh/spiermar/d3-flame-graph@2.0.3/dist/d3-flamegraph.min.js"></script>

    <script type="text/javascript">
      var data = {stack};
    </script>

    <script type="text/javascript">
    var flameGraph = d3.flamegraph()
      .width({width})
      .cellHeight({cell_height})
      .transitionDuration(750)
      .minFrameSize({min_frame_size})
      .transitionEase(d3.easeCubic)
      .sort(true)
      .title("")
      .onClick(onClick)
      .differential(false)
      .selfValue(false);

    d3.select("#chart")
      .datum(data)
      .call(flameGraph);

    var details = document.getElementById("details");
    flameGraph.setDetailsElement(details);

    document.getElementById("form").addEventListener("submit", function(event) {
      event.preventDefault();
      search();
    });

    function search() {
      var term = document.getElementById("term").value;
      flameGraph.search(term);
    }

    function clear() {
      document.getElementById("term").value = "";
      flameGraph.clear();
    }

    function resetZoom() {
      flameGraph.resetZoom();
    }

    function onClick(d) {
      console.info("Clicked on " + d.data.name);
    }
    </script>
  </body>
</html>
"""
