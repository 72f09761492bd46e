"""
FastAPI integration for type_explorer (requires the `fastapi` extra).

    from type_explorer.contrib.fastapi import mount_openapi
    app = fastapi.FastAPI()
    mount_openapi(app, sample_user, OpenAPIConfig(title="Users", version="1.0.0"))
"""

from type_explorer.contrib._fastapi import (
    DEFAULT_PATH,
    build_document,
    mount_openapi,
    openapi_router,
)

__all__ = (
    "openapi_router",
    "mount_openapi",
    "build_document",
    "DEFAULT_PATH",
)
