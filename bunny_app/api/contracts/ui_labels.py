"""
bunny_app.api.contracts.ui_labels

Purpose:
    User-facing text shared by the server-rendered page, the client call-site
    model and the CLI. Keeps the button and panel wording in one place.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UiLabels:
    panel_title: str = "Bunny Request Headers"
    no_headers: str = "No Bunny headers detected. This app may not be running behind Bunny CDN."

    breed_button: str = "Get Random Rabbit Breed"
    endpoint_button: str = "Fetch from /api/rabbit"
    loading: str = "Loading..."
