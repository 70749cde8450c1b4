"""FastAPI web service for styling text.

Endpoints::

    POST /style         Style text with a preset and/or options, receive JSON.
    GET  /health        Health check.
    GET  /styles        List presets and the style names they define.

Run::

    uvicorn attrtext.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from fastapi import FastAPI, Form, HTTPException

from attrtext import __version__
from attrtext.config import builder_from_options
from attrtext.errors import AttrTextError
from attrtext.style_manager import StyleManager

logger = logging.getLogger(__name__)

app = FastAPI(
    title="attrtext",
    description="Styled text builder service",
    version=__version__,
)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/styles")
async def list_styles() -> dict[str, Any]:
    """List available presets and style names."""
    return {
        "presets": StyleManager.PRESETS,
        "styles": StyleManager().list_style_names(),
    }


@app.post("/style")
async def style_text(
    text: str = Form(""),
    preset: str = Form("default"),
    style: Optional[str] = Form(None),
    options: str = Form("{}"),
) -> dict[str, Any]:
    """Style *text* and return the resulting document.

    - **text**: Text to style; empty or missing text yields an empty document
    - **preset**: Style preset name (default, academic, business, minimal)
    - **style**: Optional named style of the preset to start from
    - **options**: JSON object of style options, e.g. ``{"color": "red"}``
    """
    try:
        manager = StyleManager(preset)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if style is not None and not manager.has_style(style):
        raise HTTPException(status_code=400, detail=f"Unknown style {style!r}")

    try:
        parsed = json.loads(options)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=422, detail=f"options is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise HTTPException(status_code=422, detail="options must be a JSON object")

    base = manager.get_style(style) if style else None
    try:
        builder = builder_from_options(parsed, base=base)
    except AttrTextError as exc:
        logger.debug("Rejected style options %r: %s", parsed, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return builder.build(text).to_dict()
