"""Response documents served to the gateway."""

from __future__ import annotations

import json
from typing import Any, Dict, Literal, Mapping

from pydantic import BaseModel

MODULE_TYPE = "module"


class ComponentCode(BaseModel):
    code: str


class WebEngineComponent(BaseModel):
    """Component entry tagged for the web engine module registry."""

    code: str
    type: Literal["module"] = MODULE_TYPE


def format_response(
    combined: Mapping[str, str], web_engine: bool = False
) -> Dict[str, Any]:
    """Wrap a ``name -> code`` mapping in the redirect map document shape."""
    wrapper = WebEngineComponent if web_engine else ComponentCode
    components = {name: wrapper(code=code).model_dump() for name, code in combined.items()}
    return {"components": components}


def render_response(combined: Mapping[str, str], web_engine: bool = False) -> str:
    return json.dumps(format_response(combined, web_engine), separators=(",", ":"))


__all__ = ["ComponentCode", "WebEngineComponent", "format_response", "render_response"]
