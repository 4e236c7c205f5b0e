import argparse
import logging
import sys
from pathlib import Path

from cuiconnect.components.accounts import ToggleStatusInput, run_toggle_status
from cuiconnect.components.persistence import run_backup
from cuiconnect.components.reports import build_system_report, format_system_report
from cuiconnect.rules.loader import load_rules

from .config import configure_logging, validate_ops_rules
from .context import ServiceContext
from .sample_data import load_sample_data

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_context(rules_path: Path) -> ServiceContext:
    if not rules_path.exists():
        print(f"Rules file {rules_path} not found.", file=sys.stderr)
        sys.exit(1)

    try:
        rules = load_rules(rules_path)
    except ValueError as e:
        print(f"CRITICAL: {e}", file=sys.stderr)
        sys.exit(1)

    validate_ops_rules(rules)
    base_dir = rules_path.resolve().parent
    configure_logging(rules.ops, base_dir)
    return ServiceContext.create(rules, base_dir)


def load_or_exit(ctx: ServiceContext) -> None:
    result = ctx.load_users()
    if not result.success:
        logger.error(result.error)
        sys.exit(1)
    for skipped in result.skipped:
        print(f"Skipped line {skipped.line_no}: {skipped.reason}", file=sys.stderr)


def handle_seed(ctx: ServiceContext, args: argparse.Namespace) -> None:
    if not args.force:
        load_or_exit(ctx)
        if ctx.directory.users:
            print("Users table already has records; use --force to overwrite.")
            sys.exit(1)

    load_sample_data(ctx)
    result = ctx.store.save(ctx.directory)
    if not result.success:
        logger.error(result.error)
        sys.exit(1)

    print(f"Seeded {result.saved} users.")
    print("Student: ali.student@demo.com / pass123")
    print("Society Admin: farhan.admin@demo.com / admin123")
    print("Department Rep: sana.rep@demo.com / dept123")
    print("System Admin: admin.sys@demo.com / sysadmin")


def handle_users(ctx: ServiceContext, args: argparse.Namespace) -> None:
    load_or_exit(ctx)
    if not ctx.directory.users:
        print("No users registered.")
        return
    for u in ctx.directory.users:
        status = "ACTIVE" if u.active else "INACTIVE"
        print(f"{u.user_id} | {u.name} | {u.email} | {u.role} | {status}")


def handle_report(ctx: ServiceContext, args: argparse.Namespace) -> None:
    load_or_exit(ctx)
    print(format_system_report(build_system_report(ctx.directory)))


def handle_backup(ctx: ServiceContext, args: argparse.Namespace) -> None:
    load_or_exit(ctx)
    result = run_backup(
        ctx.directory,
        ctx.backup_dir,
        ctx.clock,
        retention_count=ctx.rules.ops.backups.retention_count,
    )
    if not result.success:
        logger.error(result.error)
        sys.exit(1)
    print(f"Backup created: {result.path}")


def handle_toggle(ctx: ServiceContext, args: argparse.Namespace) -> None:
    load_or_exit(ctx)

    admin = ctx.directory.find_user_by_email(args.admin_email)
    if not admin:
        logger.error(f"Admin {args.admin_email} not found. Invoke with a system admin email.")
        sys.exit(1)

    target = ctx.directory.find_user_by_email(args.email)
    if not target:
        logger.error(f"User {args.email} not found.")
        sys.exit(1)

    result = run_toggle_status(
        ToggleStatusInput(actor=admin, target=target), ctx.directory, ctx.policy, ctx.store
    )
    if not result.success:
        logger.error(result.error)
        sys.exit(1)

    status = "ACTIVE" if target.active else "INACTIVE"
    print(f"{target.email} is now {status}.")
    if not result.persisted:
        print("Warning: change could not be saved.", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="CuiConnect CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to the rules file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # seed
    seed_parser = subparsers.add_parser("seed", help="Write the demo users to the users table")
    seed_parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing users table"
    )

    # users
    subparsers.add_parser("users", help="List registered users")

    # report
    subparsers.add_parser("report", help="Print system statistics")

    # backup
    subparsers.add_parser("backup", help="Write a snapshot to the backup directory")

    # toggle
    toggle_parser = subparsers.add_parser("toggle", help="Activate/deactivate a user")
    toggle_parser.add_argument("email", help="Email of the user to toggle")
    toggle_parser.add_argument(
        "--admin-email", required=True, help="Email of the system admin performing the change"
    )

    args = parser.parse_args(argv)

    ctx = get_context(Path(args.rules))

    if args.command == "seed":
        handle_seed(ctx, args)
    elif args.command == "users":
        handle_users(ctx, args)
    elif args.command == "report":
        handle_report(ctx, args)
    elif args.command == "backup":
        handle_backup(ctx, args)
    elif args.command == "toggle":
        handle_toggle(ctx, args)


if __name__ == "__main__":
    main()
