"""Generate an OpenAPI schema file for the FastAPI application."""

from pathlib import Path
import json
import sys

from calorie_bank.main import app


def generate_openapi(output_path: Path | None = None) -> Path:
    """Write the current OpenAPI schema to ``openapi.json`` (or ``output_path``)."""
    schema = app.openapi()

    # Reads can be allowed without confirmation; writes cannot
    for path_item in schema.get("paths", {}).values():
        for method, operation in path_item.items():
            if isinstance(operation, dict):
                operation["x-openai-isConsequential"] = method != "get"
    target = output_path or Path(__file__).resolve().parent / "openapi.json"
    target.write_text(json.dumps(schema, indent=2))
    return target


if __name__ == "__main__":
    generate_openapi(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
