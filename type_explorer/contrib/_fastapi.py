"""
FastAPI contrib — serve an OpenAPI document generated from a sample value.
"""

from __future__ import annotations

from typing import Any

import fastapi

from type_explorer.adapters import OpenAPIConfig, OpenAPISchemaAdapter
from type_explorer.analysis import TypeAnalyzer

DEFAULT_PATH = "/openapi/schema.json"


def build_document(
    sample: Any,
    config: OpenAPIConfig,
    *,
    name: str = "Root",
    analyzer: TypeAnalyzer | None = None,
) -> dict[str, Any]:
    adapter = OpenAPISchemaAdapter(config, analyzer)
    adapter.ensure_dependencies()
    return adapter.generate_document(adapter.analyzer.analyze(sample), name)


def openapi_router(
    sample: Any,
    config: OpenAPIConfig,
    *,
    path: str = DEFAULT_PATH,
    name: str = "Root",
    analyzer: TypeAnalyzer | None = None,
) -> fastapi.APIRouter:
    """
    Router with one GET route returning the document.

    The sample is analyzed once, when the router is built.
    """
    document = build_document(sample, config, name=name, analyzer=analyzer)

    router = fastapi.APIRouter()

    def _serve_document() -> dict[str, Any]:
        return document

    router.add_api_route(path, _serve_document, methods=["GET"], include_in_schema=False)
    return router


def mount_openapi(
    app: fastapi.FastAPI,
    sample: Any,
    config: OpenAPIConfig,
    *,
    path: str = DEFAULT_PATH,
    name: str = "Root",
    analyzer: TypeAnalyzer | None = None,
) -> fastapi.FastAPI:
    app.include_router(openapi_router(sample, config, path=path, name=name, analyzer=analyzer))
    return app


__all__ = ("openapi_router", "mount_openapi", "build_document", "DEFAULT_PATH")
