from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from plant_management.main import create_app
from plant_management.database.bootstrap import init_schema


def main() -> None:
    # create_app already applies the schema when AUTO_INIT_DB is on; running it again is harmless.
    app = create_app()
    tables = init_schema(app)
    print(f"OK: Schema ready -> {app.config['SQLALCHEMY_DATABASE_URI'].split('@')[-1]} (tables={len(tables)})")


if __name__ == "__main__":
    main()
