"""
Admin console
Manage site content from a terminal through the client layer
"""

import sys
import asyncio
import argparse
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from highfive.config import settings
from highfive.client import ClientApp, ValidationFailure
from highfive.client.views.admin import ADMIN_SCREENS
from highfive.client.views.base import ScreenState


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="HighFive admin console")
    parser.add_argument("--api", default=settings.API_BASE_URL, help="Site API base URL")
    parser.add_argument("--email", help="Admin email (prompts for the password)")
    parser.add_argument("--token", help="Existing access token instead of a login")

    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List a section")
    list_cmd.add_argument("section", choices=sorted(ADMIN_SCREENS))

    add_cmd = sub.add_parser("add", help="Create a row: add team name=Ada role=Engineer")
    add_cmd.add_argument("section", choices=sorted(ADMIN_SCREENS))
    add_cmd.add_argument("fields", nargs="+", metavar="field=value")

    delete_cmd = sub.add_parser("delete", help="Delete a row by id")
    delete_cmd.add_argument("section", choices=sorted(ADMIN_SCREENS))
    delete_cmd.add_argument("row_id")

    return parser.parse_args(argv)


def print_rows(rows):
    if not rows:
        print("   (empty)")
    for row in rows:
        label = row.get("title") or row.get("name") or row.get("message") or ""
        print(f"   {row.get('id')}  {label}")


async def run(args) -> int:
    async with ClientApp(base_url=args.api) as app:
        if args.token:
            await app.start(args.token)
        elif args.email:
            password = input(f"Password for {args.email}: ").strip()
            result = await app.auth.login(args.email, password)
            if not result.success:
                print(f"❌ {result.error}")
                return 1
        else:
            await app.start()

        decision = app.navigator.navigate(f"/admin/{args.section}")
        if decision.location != f"/admin/{args.section}":
            print("❌ Not signed in. Use --email or --token.")
            return 1

        screen = app.screen(args.section)
        screen.load()
        await app.cache.fetch(screen.key, screen.fetch_rows)

        if screen.state is ScreenState.LOAD_FAILED:
            print(f"❌ {screen.error}")
            return 1

        if args.command == "list":
            print_rows(screen.rows)
            return 0

        if args.command == "add":
            screen.start_new()
            for pair in args.fields:
                name, _, value = pair.partition("=")
                screen.set_field(name, value)
            try:
                result = await screen.submit()
            except ValidationFailure as e:
                print(f"❌ {e.message}")
                return 1
        else:
            result = await screen.delete(args.row_id)

        if not result.ok:
            print(f"❌ {screen.error}")
            return 1

        print("✅ Done")
        print_rows(screen.rows)
        return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(run(parse_args())))
