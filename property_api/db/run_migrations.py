"""
Programmatic Alembic migration runner.

Runs migrations without an alembic.ini: the script location is this package's
migrations directory and the URL comes from property_api.db.config.

Usage examples:
    python -m property_api.db.run_migrations upgrade head
    python -m property_api.db.run_migrations downgrade -1
    python -m property_api.db.run_migrations stamp head
    python -m property_api.db.run_migrations history
"""

import sys
from pathlib import Path
from typing import Callable, Dict, List

from alembic import command
from alembic.config import Config

from property_api.db.config import get_settings

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def build_config() -> Config:
    """Alembic config pointing at the bundled migrations; env.py uses the async URL online."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", get_settings().sync_database_url)
    return cfg


def _show(cfg: Config, *args: str) -> None:
    if not args:
        print("Usage: show <revision>")
        sys.exit(2)
    command.show(cfg, args[0])


COMMANDS: Dict[str, Callable[..., None]] = {
    "upgrade": lambda cfg, *a: command.upgrade(cfg, *(a or ("head",))),
    "downgrade": lambda cfg, *a: command.downgrade(cfg, *(a or ("-1",))),
    "stamp": lambda cfg, *a: command.stamp(cfg, *(a or ("head",))),
    "history": command.history,
    "current": command.current,
    "heads": command.heads,
    "revision": command.revision,
    "show": _show,
}


# PUBLIC_INTERFACE
def main(argv: List[str] | None = None) -> None:
    """Run one Alembic command, e.g. ``main(["upgrade", "head"])``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("No Alembic arguments provided. Example: upgrade head")
        sys.exit(1)

    name, rest = args[0], args[1:]
    handler = COMMANDS.get(name)
    if handler is None:
        print(f"Unsupported Alembic command: {name}")
        sys.exit(2)
    handler(build_config(), *rest)


if __name__ == "__main__":
    main()
