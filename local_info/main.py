import argparse
import logging
import sys
import time
from typing import List, Optional

from .config import Colours, ProviderConfig
from .display import Display, load_local_info
from .errors import LocalInfoError


def colourize(temperature: str) -> str:
    """Helper to wrap the temperature region with the proper ANSI colour."""
    if temperature == LocalInfoError.temperature_text:
        return f"{Colours.RED}{temperature}{Colours.RESET}"
    elif temperature == "N/A":
        return f"{Colours.YELLOW}{temperature}{Colours.RESET}"
    else:
        return f"{Colours.GREEN}{temperature}{Colours.RESET}"


def format_line(display: Display) -> str:
    if display.title:
        return f"{Colours.RED}{display.title}{Colours.RESET}"
    weather = " ".join(
        part for part in (colourize(display.temperature), display.description) if part
    )
    return f"{display.label}: {Colours.BOLD}{display.time}{Colours.RESET}  {weather}"


def redraw(display: Display) -> None:
    # One write per redraw so the clock thread and the pipeline don't interleave
    sys.stdout.write("\r\033[K" + format_line(display))
    sys.stdout.flush()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show local time and current weather for a US ZIP code."
    )
    parser.add_argument("zip_code", nargs="?", help="5-digit US ZIP code")
    parser.add_argument("utc_offset", nargs="?", type=int, help="UTC offset in hours, e.g. -7")
    parser.add_argument("--once", action="store_true", help="print one snapshot and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="log to stderr")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ------------------------------------------------------------------
    # 1️⃣ Gather ZIP and offset (prompt for whatever is missing)
    # ------------------------------------------------------------------
    zip_code = args.zip_code
    if zip_code is None:
        zip_code = input("Enter ZIP: ").strip()
    utc_offset = args.utc_offset
    if utc_offset is None:
        raw = input("Enter UTC offset in hours: ").strip()
        try:
            utc_offset = int(raw)
        except ValueError:
            sys.exit(f"Not a whole number of hours: {raw!r}")

    # ------------------------------------------------------------------
    # 2️⃣ Start the clock and run the weather lookups
    # ------------------------------------------------------------------
    on_update = None if args.once else redraw
    with load_local_info(
        zip_code, utc_offset, config=ProviderConfig.from_env(), on_update=on_update
    ) as view:
        if args.once:
            print(format_line(view.display))
            return 1 if view.state in ("failed", "error") else 0

        # ------------------------------------------------------------------
        # 3️⃣ Keep ticking until the user hits Ctrl-C
        # ------------------------------------------------------------------
        if view.ticker is None:
            print()
            return 1
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
