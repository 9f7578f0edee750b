"""
Script to extract OpenAPI JSON from the FastAPI app.

Run with: uv run python -m scripts.extract_openapi [output.json]
"""
import json
import sys
from pathlib import Path

from main import app


def main(output_path: Path | None = None) -> Path:
    openapi_data = app.openapi()

    # Save as JSON
    output_path_json = output_path or Path("openapi.json")
    with open(output_path_json, "w") as f:
        json.dump(openapi_data, f, indent=2)
    print(f"✅ OpenAPI JSON saved to {output_path_json.absolute()}")
    return output_path_json


if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
