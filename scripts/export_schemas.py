"""Export JSON schemas for MultiCityGenerationRequest and MultiCityTrip."""

import json
from pathlib import Path

from pydantic import BaseModel

from backend.multicity.models import MultiCityGenerationRequest, MultiCityResult, MultiCityTrip

SCHEMA_MODELS: list[type[BaseModel]] = [MultiCityGenerationRequest, MultiCityTrip, MultiCityResult]


def main(schemas_dir: Path = Path("docs/schemas")) -> list[Path]:
    """Export schemas to docs/schemas/."""
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for model in SCHEMA_MODELS:
        schema_path = schemas_dir / f"{model.__name__}.schema.json"
        with open(schema_path, "w") as f:
            json.dump(model.model_json_schema(), f, indent=2)
        print(f"Exported {model.__name__} schema to {schema_path}")
        written.append(schema_path)

    return written


if __name__ == "__main__":
    main()
