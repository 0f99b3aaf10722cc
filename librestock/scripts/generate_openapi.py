# Writes the OpenAPI schema consumed by the frontend client generators.
#
#   python -m librestock.scripts.generate_openapi [output-path]

import json
import logging
import sys
from pathlib import Path

from librestock.main import app

logger = logging.getLogger("librestock")

DEFAULT_OUTPUT = Path("openapi.json")


def generate(output: Path = DEFAULT_OUTPUT) -> Path:
    schema = app.openapi()
    output.write_text(json.dumps(schema, indent=2, sort_keys=False) + "\n", encoding="utf-8")
    logger.info(f"OpenAPI schema written to {output} ({len(schema.get('paths', {}))} paths)")
    return output


if __name__ == "__main__":
    generate(Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_OUTPUT)
