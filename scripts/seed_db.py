from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from plant_management.main import create_app
from plant_management.database.bootstrap import init_schema, seed_demo_data


def main() -> None:
    app = create_app()
    init_schema(app)
    created = seed_demo_data(app)
    print(f"OK: Seeded database ({created} employees created)")


if __name__ == "__main__":
    main()
