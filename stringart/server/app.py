"""FastAPI application serving generated string art patterns."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from ..config import ConfigurationError
from ..controller import StringArtController


def create_controller() -> StringArtController:
    return StringArtController()


controller = create_controller()
app = FastAPI(title="String Art Pattern Server")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/api/status")
def status() -> Dict[str, Any]:
    return {"pattern": controller.pattern_summary()}


@app.get("/api/pattern")
def get_pattern() -> Dict[str, Any]:
    return controller.pattern_strokes()


@app.get("/api/pattern.svg")
def get_pattern_svg() -> Response:
    return Response(content=controller.pattern_svg(), media_type="image/svg+xml")


@app.post("/api/pattern")
def post_pattern(payload: Dict[str, Any]) -> Dict[str, Any]:
    try:
        pattern = controller.load_config_dict(payload)
    except ConfigurationError as exc:
        raise HTTPException(
            status_code=400,
            detail={"field": exc.field, "message": str(exc)},
        ) from exc
    return {
        "ok": True,
        "count": len(pattern),
        "bounding_box": pattern.bounding_box(),
    }


@app.delete("/api/pattern")
def clear_pattern() -> Dict[str, Any]:
    pattern = controller.reset()
    return {"ok": True, "count": len(pattern)}


__all__ = ["app", "controller", "create_controller"]
