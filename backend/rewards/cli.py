"""
Command-line interface for the rewards backend.
Works directly against the configured database, without the HTTP layer.
"""

import argparse
import json
import sys
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from rewards.config import Settings
from rewards.db.db import Base, SessionLocal
from rewards.models.transaction import Transaction
from rewards.schemas.reward_schemas import RewardResponse
from rewards.services.errors import ServiceError
from rewards.services.reward_service import RewardService
from rewards.services.transaction_store import SqlAlchemyTransactionStore


def _ensure_tables(db: Session) -> None:
    Base.metadata.create_all(bind=db.get_bind())


def cmd_add(args, db: Session) -> int:
    """
    Record a new purchase.

    Args:
        args: Parsed command-line arguments with fields:
            - customer: customer id
            - amount: decimal string
            - date: YYYY-MM-DD
    """
    try:
        amount = Decimal(args.amount)
    except InvalidOperation:
        print(f"Error: Invalid amount '{args.amount}'. Expected a number.")
        return 1
    if not amount.is_finite():
        print(f"Error: Invalid amount '{args.amount}'. Expected a finite number.")
        return 1

    try:
        transaction_date = datetime.strptime(args.date, "%Y-%m-%d").date()
    except ValueError:
        print(f"Error: Invalid date format '{args.date}'. Expected YYYY-MM-DD.")
        return 1

    store = SqlAlchemyTransactionStore(db)
    try:
        saved = store.save(
            Transaction(customer_id=args.customer, amount=amount, transaction_date=transaction_date)
        )
    except ServiceError as exc:
        print(f"Error: {exc.message}")
        return 1

    print(f"Transaction added: {saved.id}")
    print(f"  Customer: {saved.customer_id}")
    print(f"  Amount: {Decimal(saved.amount):.2f}")
    print(f"  Date: {saved.transaction_date.isoformat()}")
    return 0


def cmd_list(args, db: Session) -> int:
    store = SqlAlchemyTransactionStore(db)
    if args.customer is None:
        rows = store.find_all()
    else:
        rows = store.find_transactions_by_customer_id(args.customer)

    if not rows:
        print("No transactions found.")
        return 0

    for row in rows:
        print(f"{row.id:>6}  customer={row.customer_id:<6} {row.transaction_date.isoformat()}  {Decimal(row.amount):>10.2f}")
    return 0


def cmd_rewards(args, db: Session) -> int:
    """Print the monthly and total reward points for one customer."""
    result = RewardService(SqlAlchemyTransactionStore(db)).calculate_rewards(args.customer_id)

    if args.json:
        print(json.dumps(RewardResponse.from_result(result).model_dump(by_alias=True)))
        return 0

    print(f"\n=== Rewards for customer {result.customer_id} ===\n")
    if result.monthly_points:
        for month, points in result.monthly_points.items():
            print(f"  {month}: {points} points")
    else:
        print("  (No purchases recorded)")
    print(f"\nTotal: {result.total_points} points\n")
    return 0


def cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("rewards.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rewards-cli",
        description="Customer rewards CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Add command
    parser_add = subparsers.add_parser("add", help="Record a new transaction")
    parser_add.add_argument("--customer", type=int, required=True, help="Customer ID")
    parser_add.add_argument("--amount", required=True, help="Purchase amount, e.g. 120.50")
    parser_add.add_argument("--date", required=True, help="Transaction date (YYYY-MM-DD)")

    # List command
    parser_list = subparsers.add_parser("list", help="List transactions")
    parser_list.add_argument("--customer", type=int, default=None, help="Only this customer's transactions")

    # Rewards command
    parser_rewards = subparsers.add_parser("rewards", help="Show reward points for a customer")
    parser_rewards.add_argument("customer_id", type=int, help="Customer ID")
    parser_rewards.add_argument("--json", action="store_true", help="Print the API JSON shape")

    # Serve command
    parser_serve = subparsers.add_parser("serve", help="Run the HTTP API")
    parser_serve.add_argument("--host", default=Settings.API_HOST)
    parser_serve.add_argument("--port", type=int, default=Settings.API_PORT)
    parser_serve.add_argument("--reload", action="store_true")

    return parser


def main(argv: Optional[List[str]] = None, session_factory: Callable[[], Session] = SessionLocal) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "serve":
        return cmd_serve(args)

    commands = {
        "add": cmd_add,
        "list": cmd_list,
        "rewards": cmd_rewards,
    }
    with session_factory() as db:
        _ensure_tables(db)
        return commands[args.command](args, db)


if __name__ == "__main__":
    sys.exit(main())
