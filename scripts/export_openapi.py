from __future__ import annotations

import argparse
import json
from pathlib import Path

from hotel_booking_api.api.app import create_app


def main() -> None:
    """Export the OpenAPI document of the FastAPI app, by default into `docs/openapi.json`."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--output", type=Path, default=Path("docs/openapi.json"))
    args = parser.parse_args()

    document = create_app().openapi()
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(
        json.dumps(document, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    print(f"OpenAPI exported to {args.output}")


if __name__ == "__main__":
    main()
