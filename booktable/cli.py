"""Command-line interface for BookTable - HTTP client for the server API."""

import logging
import sys
from datetime import date, timedelta

import httpx

from booktable.config import get_config, setup_logging

logger = logging.getLogger(__name__)


class BookTableCLI:
    """Interactive restaurant search against a running BookTable server."""

    def __init__(self) -> None:
        """Initialize the CLI."""
        self.config = get_config()
        setup_logging(self.config)
        logger.info("BookTable CLI initialized as HTTP client")

    def run(self) -> None:
        """Run the CLI application."""
        print("\n" + "=" * 60)
        print("BOOKTABLE - Find a table")
        print("=" * 60 + "\n")
        print(f"Server: {self.config.server_url}")
        print("Press Enter to accept the default shown in brackets.")
        print("Type 'quit' or 'exit' at any prompt to end the session.\n")

        while True:
            try:
                params = self._ask_search()
                if params is None:
                    print("\nThank you for using BookTable. Goodbye!")
                    break

                results = self._search(params)
                if results:
                    self._offer_slots(results, params["date"])

            except KeyboardInterrupt:
                print("\n\nExiting BookTable. Goodbye!")
                break
            except Exception as e:
                logger.error(f"Unexpected error: {e}", exc_info=True)
                print(f"\n⚠ An unexpected error occurred: {e}")
                print("Please try again or type 'quit' to exit.")

    @staticmethod
    def _prompt(label: str, default: str = "") -> str | None:
        suffix = f" [{default}]" if default else ""
        value = input(f"{label}{suffix}: ").strip()
        if value.lower() in ("quit", "exit", "q"):
            return None
        return value or default

    def _ask_search(self) -> dict | None:
        """Collect search parameters. Returns None when the user quits."""
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        answers = {}
        for key, label, default in (
            ("date", "Date (YYYY-MM-DD)", tomorrow),
            ("time", "Time (HH:MM)", "19:00"),
            ("party_size", "Party size", "2"),
            ("location", "Location (city, state or zip)", ""),
            ("cuisine", "Cuisine", ""),
        ):
            value = self._prompt(label, default)
            if value is None:
                return None
            if value:
                answers[key] = value
        return answers

    def _get(self, path: str, params: dict | None = None) -> httpx.Response | None:
        """GET an API path, printing a friendly message on connection problems."""
        try:
            with httpx.Client(timeout=30.0) as client:
                return client.get(f"{self.config.server_url}{path}", params=params)
        except httpx.TimeoutException:
            logger.exception("Request timed out")
            print("\n⚠ Request timed out. Please try again.")
        except httpx.ConnectError:
            logger.exception("Cannot connect to server")
            print(f"\n⚠ Cannot connect to server at {self.config.server_url}")
            print("Make sure the server is running:")
            print("  python -m booktable.server")
        return None

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        if response.headers.get("content-type", "").startswith("application/json"):
            body = response.json()
            return body.get("error") or str(body.get("detail", response.text))
        return response.text

    def _search(self, params: dict) -> list[dict]:
        """Run a search and print the results."""
        response = self._get("/restaurants/search", params=params)
        if response is None:
            return []

        if response.status_code != 200:
            print(f"\n⚠ Search failed (status {response.status_code}): {self._error_message(response)}")
            return []

        results = response.json()
        if not results:
            print("\nNo restaurants match your search. Try another time or location.")
            return []

        print(f"\n✓ Found {len(results)} restaurant(s):\n")
        for number, result in enumerate(results, start=1):
            restaurant = result["restaurant"]
            address = restaurant["address"]
            print(
                f"  {number}. {restaurant['name']} - {restaurant['cuisine_type']} "
                f"{restaurant['price_range']} ({address['city']}, {address['state']})"
            )
            if result["quick_slots"]:
                print(f"     Around your time: {', '.join(result['quick_slots'])}")
        return results

    def _offer_slots(self, results: list[dict], day: str) -> None:
        """Let the user pick a result and show its bookable slots."""
        choice = self._prompt("\nShow bookable times for result # (Enter to skip)")
        if not choice:
            return

        try:
            restaurant = results[int(choice) - 1]["restaurant"]
        except (ValueError, IndexError):
            print(f"\n⚠ '{choice}' is not one of the results.")
            return

        response = self._get(f"/restaurants/{restaurant['id']}/slots", params={"date": day})
        if response is None:
            return

        if response.status_code != 200:
            print(f"\n⚠ Could not load times (status {response.status_code}): {self._error_message(response)}")
            return

        slots = response.json()["slots"]
        if slots:
            print(f"\n{restaurant['name']} on {day}: {', '.join(slots)}")
        else:
            print(f"\n{restaurant['name']} has no available times on {day}.")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        # Validate configuration by attempting to load it
        get_config()
    except Exception as e:
        print(f"Configuration error: {e}")
        print("\nCheck the BookTable settings in your environment or .env file.")
        sys.exit(1)

    cli = BookTableCLI()
    cli.run()


if __name__ == "__main__":
    main()
