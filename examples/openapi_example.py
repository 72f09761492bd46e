"""
OpenAPI — component schemas from sample API responses, served by FastAPI.

Key concepts:
- OpenAPIConfig = document info + servers (pydantic model)
- Nested objects become named components with $ref links
- contrib.fastapi.mount_openapi() serves the document from an app

    python -m examples.openapi_example
    uvicorn examples.openapi_example:app
"""

import json

import fastapi

from type_explorer import analyze
from type_explorer.adapters import OpenAPIConfig, OpenAPISchemaAdapter, Server
from type_explorer.contrib.fastapi import mount_openapi
from examples._infra import banner


# Sample response structures from a JSONPlaceholder-style API
sample_responses = {
    "post": {
        "userId": 1,
        "id": 1,
        "title": "sunt aut facere repellat provident",
        "body": "quia et suscipit suscipit recusandae",
    },
    "users": [
        {
            "id": 1,
            "name": "Leanne Graham",
            "username": "Bret",
            "email": "Sincere@april.biz",
            "address": {
                "street": "Kulas Light",
                "city": "Gwenborough",
                "geo": {"lat": "-37.3159", "lng": "81.1496"},
            },
            "company": {"name": "Romaguera-Crona", "bs": "harness real-time e-markets"},
        },
    ],
}

config = OpenAPIConfig(
    title="JSONPlaceholder API",
    version="1.0.0",
    description="Schemas inferred from sample responses",
    servers=[Server(url="https://jsonplaceholder.typicode.com", description="public")],
)

adapter = OpenAPISchemaAdapter(config)


# ═══════════════════════════════════════════════════════════════════════════════
# FastAPI app — GET /openapi/schema.json returns the generated document
# ═══════════════════════════════════════════════════════════════════════════════

app = mount_openapi(fastapi.FastAPI(), sample_responses["users"], config, name="Users")


def main() -> None:
    for name, sample in sample_responses.items():
        banner(f"Components for {name!r}")
        document = adapter.generate_document(analyze(sample), name=name.capitalize())
        print(json.dumps(document["components"], indent=2))

    banner("Full document")
    print(adapter.generate_schema_from_data(sample_responses["post"]))

    print("\nDone!")


if __name__ == "__main__":
    main()
