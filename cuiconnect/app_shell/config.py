import logging
import os
import sys
from pathlib import Path

from cuiconnect.rules.models import OpsRules, Rules

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def validate_ops_rules(rules: Rules) -> None:
    """
    Validate operational requirements before startup.
    """
    ops = rules.ops

    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        print(
            f"CRITICAL: Missing required environment variables: {', '.join(missing)}",
            file=sys.stderr,
        )
        sys.exit(1)

    if logging.getLevelName(ops.log_level.upper()) not in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    ):
        print(f"CRITICAL: Unknown log level: {ops.log_level}", file=sys.stderr)
        sys.exit(1)


def configure_logging(ops: OpsRules, base_dir: Path) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if ops.log_file:
        handlers.append(logging.FileHandler(base_dir / ops.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=ops.log_level.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
