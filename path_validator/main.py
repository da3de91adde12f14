import logging

from fastapi import FastAPI

from .join import get_relative_path, join_paths
from .models import (
    HealthResponse,
    JoinRequest,
    NormalizeRequest,
    OSResponse,
    PathResponse,
    RelativeRequest,
    SanitizeRequest,
    TraversalRequest,
    TraversalResponse,
    ValidateRequest,
    ValidationResult,
)
from .normalize import normalize_path
from .rules import get_current_os
from .validate import is_path_traversal, sanitize_path, validate_path

logger = logging.getLogger(__name__)

app = FastAPI(
    title="path-validator",
    description="OS-aware path validation, normalization and sanitization over plain strings",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.get("/os", response_model=OSResponse)
def current_os():
    return {"os": get_current_os()}

@app.post("/validate", response_model=ValidationResult)
def validate(req: ValidateRequest):
    result = validate_path(req.path, req.options)
    if not result.is_valid:
        logger.info("path rejected: %s", ", ".join(code.value for code in result.codes))
    return result

@app.post("/normalize", response_model=PathResponse)
def normalize(req: NormalizeRequest):
    return {"path": normalize_path(req.path, req.options)}

@app.post("/sanitize", response_model=PathResponse)
def sanitize(req: SanitizeRequest):
    return {"path": sanitize_path(req.path, req.os)}

@app.post("/join", response_model=PathResponse)
def join(req: JoinRequest):
    return {"path": join_paths(*req.segments, os=req.os)}

@app.post("/relative", response_model=PathResponse)
def relative(req: RelativeRequest):
    return {"path": get_relative_path(req.from_path, req.to_path, os=req.os)}

@app.post("/traversal", response_model=TraversalResponse)
def traversal(req: TraversalRequest):
    return {"path": req.path, "traversal": is_path_traversal(req.path, os=req.os)}
