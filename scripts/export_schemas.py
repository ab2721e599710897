"""Export JSON schemas for the route wire contract."""

import json
from pathlib import Path

from pydantic import BaseModel

from backend.app.models import GeneratedRoute, Route, TimelineDay, TravelIntent

EXPORTED_MODELS: tuple[type[BaseModel], ...] = (TravelIntent, Route, TimelineDay, GeneratedRoute)


def export_schemas(schemas_dir: Path) -> list[Path]:
    """Write one <Model>.schema.json per exported model.

    Args:
        schemas_dir: Output directory (created if missing)

    Returns:
        Paths of the written schema files
    """
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for model in EXPORTED_MODELS:
        path = schemas_dir / f"{model.__name__}.schema.json"
        with open(path, "w") as f:
            json.dump(model.model_json_schema(), f, indent=2)
        written.append(path)
    return written


def main() -> None:
    """Export schemas to docs/schemas/."""
    for path in export_schemas(Path("docs/schemas")):
        print(f"Exported schema to {path}")


if __name__ == "__main__":
    main()
