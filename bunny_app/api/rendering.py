"""
bunny_app.api.rendering

Purpose:
    Server-side HTML rendering for the demo page: greeting, Bunny header
    panel and the rabbit buttons.

Notes:
    - All dynamic values are HTML-escaped here; the header inspector returns
      raw values.
    - Each button is an independent call-site with idle/pending/resolved
      states: disabled and labelled "Loading..." while pending.

Created:
    2026-10-19
"""

from __future__ import annotations

import json
from html import escape
from typing import Sequence

from bunny_app.api.contracts.api_paths import ApiPaths
from bunny_app.api.contracts.ui_labels import UiLabels
from bunny_app.shared.cdn_headers import HeaderEntry

_paths = ApiPaths()
_labels = UiLabels()


def render_header_panel(entries: Sequence[HeaderEntry]) -> str:
    if not entries:
        return (
            '<section class="bunny-headers">'
            f"<h2>{escape(_labels.panel_title)}</h2>"
            f'<p class="empty">{escape(_labels.no_headers)}</p>'
            "</section>"
        )

    rows = "".join(
        f'<div class="entry"><dt>{escape(e.name)}</dt><dd>{escape(e.value)}</dd></div>'
        for e in entries
    )
    return (
        '<section class="bunny-headers">'
        f"<h2>{escape(_labels.panel_title)}</h2>"
        f"<dl>{rows}</dl>"
        "</section>"
    )


def _button(button_id: str, label: str) -> str:
    return (
        f'<div class="rabbit-button">'
        f'<button id="{button_id}" type="button">{escape(label)}</button>'
        f'<p id="{button_id}-result" class="breed" hidden></p>'
        f"</div>"
    )


def _button_script() -> str:
    # Values go through json.dumps so they land as JS string literals.
    action_path = json.dumps(_paths.random_breed_action)
    rabbit_path = json.dumps(_paths.rabbit)
    loading = json.dumps(_labels.loading)
    return f"""
<script>
function wireButton(buttonId, load) {{
  const button = document.getElementById(buttonId);
  const result = document.getElementById(buttonId + "-result");
  const idleLabel = button.textContent;
  button.addEventListener("click", async () => {{
    button.disabled = true;
    button.textContent = {loading};
    const breed = await load();
    result.textContent = breed;
    result.hidden = false;
    button.textContent = idleLabel;
    button.disabled = false;
  }});
}}
wireButton("rabbit-action", async () => {{
  const r = await fetch({action_path}, {{ method: "POST" }});
  return await r.json();
}});
wireButton("rabbit-endpoint", async () => {{
  const r = await fetch({rabbit_path});
  return (await r.json()).breed;
}});
</script>
"""


def render_home_page(*, title: str, greeting: str, entries: Sequence[HeaderEntry]) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{escape(title)}</title>
</head>
<body>
  <main>
    <h1>{escape(title)}</h1>
    <p class="greeting">{escape(greeting)}</p>
    {_button("rabbit-action", _labels.breed_button)}
    {_button("rabbit-endpoint", _labels.endpoint_button)}
    {render_header_panel(entries)}
  </main>
  {_button_script()}
</body>
</html>
"""
