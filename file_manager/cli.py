import argparse
import logging
from typing import Optional

from file_manager.config.settings import settings


def _configure_logging() -> None:
    # Log lines must never reach the terminal the shell is using unless asked for
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file, level=settings.log_level, format=log_format, force=True
        )
    elif settings.log_stderr:
        logging.basicConfig(level=settings.log_level, format=log_format, force=True)
    else:
        logging.basicConfig(handlers=[logging.NullHandler()], force=True)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="file-manager",
        description="Interactive file manager shell.",
    )
    parser.add_argument(
        "--username",
        default="User",
        help="Name used in the greeting and farewell (default: User)",
    )
    # Extra process arguments are ignored
    args, _unknown = parser.parse_known_args(argv)

    _configure_logging()

    from file_manager.container import container

    dispatcher = container.create_dispatcher(username=args.username or "User")
    return dispatcher.run(prompt=settings.prompt)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
