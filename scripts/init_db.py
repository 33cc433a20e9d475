from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module
from workforce_attendance.container import build_container
from workforce_attendance.database.bootstrap import apply_schema, list_tables


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    container = build_container(db_config=db_config)
    apply_schema(container.conn)
    tables = list_tables(container.conn)
    print(
        "OK: schema applied -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
