#!/usr/bin/env python3
"""
Interactive CLI for the storefront

A REPL over StorefrontApp: browse and search the catalog, log in, and manage
the cart against a running storefront API.

Usage:
    storefront [--api-url URL] [--mobile] [--verbose]

    or

    python -m storefront.cli.interactive
"""
import logging
import shlex
import sys
from typing import Any, Dict, List

from storefront.app import Notification, StorefrontApp
from storefront.config import config
from storefront.features.cart import CartPresenter
from storefront.features.catalog import CatalogPresenter

COMMANDS = """Commands:
  products                      show the catalog
  search <text>                 search right away
  type <text>                   type into the debounced search box, one key at a time
  login <username> <password>
  register <username> <password> <confirm>
  logout
  whoami
  cart                          show the cart
  checkout                      show the read-only order summary
  add <product_id>              add a product from the catalog
  qty <product_id> <n>          set a quantity (0 removes)
  + <product_id> / - <product_id>
  quit"""


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("🛒 Storefront - Interactive Mode")
    print("=" * 60)
    print(COMMANDS)
    print("=" * 60)


def print_notification(notification: Notification):
    icon = {"success": "✅", "warning": "⚠️ ", "error": "❌"}.get(notification.variant, "ℹ️ ")
    print(f"{icon} {notification.message}")


class StorefrontShell:
    """Command dispatcher for one REPL session."""

    def __init__(self, app: StorefrontApp, mobile: bool = False):
        self.app = app
        self.catalog_presenter = CatalogPresenter()
        self.cart_presenter = CartPresenter()
        self.search_box = app.search_box(mobile=mobile)

    def show_products(self):
        print(self.catalog_presenter.render(self.app.catalog.products))

    def show_cart(self, read_only: bool = False):
        if not self.app.session.is_logged_in:
            print("Log in to see your cart.")
            return
        print(self.cart_presenter.render(self.app.line_items(), read_only=read_only))

    def _after(self, result: Dict[str, Any], show):
        if result["success"]:
            show()

    def handle(self, line: str) -> bool:
        """Run one command. Returns False when the shell should exit."""
        try:
            parts: List[str] = shlex.split(line)
        except ValueError as e:
            print(f"❌ {e}")
            return True
        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]

        if command in ("quit", "exit", "q"):
            return False
        if command == "help":
            print(COMMANDS)
        elif command == "products":
            self._after(self.app.load_products(), self.show_products)
        elif command == "search":
            self._after(self.app.search(" ".join(args)), self.show_products)
        elif command == "type":
            text = " ".join(args)
            for end in range(1, len(text) + 1):
                self.search_box.on_input(text[:end])
            # Only the last keystroke is still pending
            self.search_box.flush()
            self.show_products()
        elif command == "login" and len(args) == 2:
            self._after(
                self.app.login({"username": args[0], "password": args[1]}),
                self.show_cart,
            )
        elif command == "register" and len(args) == 3:
            self.app.register({"username": args[0], "password": args[1], "confirm_password": args[2]})
        elif command == "logout":
            self.app.logout()
            print("Logged out.")
        elif command == "whoami":
            session = self.app.session.session
            if session is None:
                print("Not logged in.")
            else:
                print(f"{session.username} (balance: {session.balance})")
        elif command == "cart":
            self.show_cart()
        elif command == "checkout":
            self.show_cart(read_only=True)
        elif command == "add" and len(args) == 1:
            self._after(self.app.add_to_cart(args[0]), self.show_cart)
        elif command == "qty" and len(args) == 2:
            try:
                qty = int(args[1])
            except ValueError:
                print("❌ Quantity must be a whole number")
                return True
            self._after(self.app.change_quantity(args[0], qty), self.show_cart)
        elif command == "+" and len(args) == 1:
            self._after(self.app.increment(args[0]), self.show_cart)
        elif command == "-" and len(args) == 1:
            self._after(self.app.decrement(args[0]), self.show_cart)
        else:
            print(f"Unknown command: {line!r}. Type 'help' for the list.")
        return True


def interactive_main(api_url: str, mobile: bool = False):
    """
    Interactive storefront session.

    Args:
        api_url: Base URL of the storefront API
        mobile: Use the mobile search debounce window
    """
    print_banner()
    app = StorefrontApp(base_url=api_url, notifier=print_notification)
    shell = StorefrontShell(app, mobile=mobile)

    if app.start()["success"]:
        shell.show_products()

    # Main REPL loop
    while True:
        try:
            line = input("\n🛍️  > ").strip()
            if not shell.handle(line):
                print("\n👋 Goodbye!")
                break
        except (KeyboardInterrupt, EOFError):
            print("\n\n👋 Goodbye!")
            break


def main():
    """Entry point for the interactive CLI."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Storefront - Interactive Mode",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--api-url',
        default=config.API_BASE_URL,
        help=f'Storefront API base URL (default: {config.API_BASE_URL})'
    )
    parser.add_argument(
        '--mobile',
        action='store_true',
        help=f'Use the mobile search debounce window ({config.SEARCH_DEBOUNCE_MOBILE_MS}ms)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log HTTP traffic and state changes'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        interactive_main(args.api_url, mobile=args.mobile)
    except Exception as e:
        print(f"\n❌ Fatal error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
