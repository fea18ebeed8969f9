#!/usr/bin/env python3
"""
Password Strength Estimator (CLI)

Estimates password strength entirely locally using a brute-force model:
- Character class detection (lowercase, uppercase, digits, symbols)
- Charset size as the union of the classes actually used
- Entropy in bits (length x log2(charset))
- Average brute-force guesses and crack times at five attacker speeds
- Actionable suggestions

The password is never sent anywhere, printed, or logged.
Outputs human-readable text or JSON.
"""

from __future__ import annotations

import argparse
import enum
import functools
import json
import logging
import math
import sys
from dataclasses import asdict, dataclass
from getpass import getpass
from typing import Dict, List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)


# -------------------------- Utilities -------------------------- #


ANSI = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "red": "\033[31m",
    "yellow": "\033[33m",
    "green": "\033[32m",
    "cyan": "\033[36m",
}


def colorize(text: str, color: str, use_color: bool) -> str:
    if not use_color:
        return text
    return f"{ANSI.get(color, '')}{text}{ANSI['reset']}"


def safe_stdin_read() -> str:
    data = sys.stdin.read()
    # Strip trailing newlines that can appear with echo/pipes
    return data.rstrip("\r\n")


# -------------------------- Models -------------------------- #


POOL_LOWER = 26
POOL_UPPER = 26
POOL_DIGITS = 10
POOL_SYMBOLS = 32  # common printable punctuation; everything else is counted here too

# Guesses per second, slowest attacker first
ATTACK_SPEEDS: Tuple[float, ...] = (1e3, 1e4, 1e8, 1e10, 1e12)

ATTACK_SCENARIOS: Tuple[str, ...] = (
    "Slow online (1e3/s)",
    "Typical online (1e4/s)",
    "Single GPU (1e8/s)",
    "Offline cluster (1e10/s)",
    "Very large cluster (1e12/s)",
)

# Crack times beyond this many seconds are reported as infinite
CRACK_TIME_CEILING = 1e30

RECOMMENDED_LENGTH = 12

GENERAL_ADVICE: Tuple[str, ...] = (
    "Use unrelated words for passphrase (e.g., 'coffee-wagon-silver').",
    "Avoid dictionary words or predictable substitutions.",
    "Use a password manager for unique long passwords.",
)


@functools.total_ordering
class Category(enum.Enum):
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    REASONABLE = "Reasonable"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        order = list(Category)
        return order.index(self) < order.index(other)


# Exclusive upper bound in bits for each category, lowest first
CATEGORY_THRESHOLDS: Tuple[Tuple[float, Category], ...] = (
    (28.0, Category.VERY_WEAK),
    (36.0, Category.WEAK),
    (60.0, Category.REASONABLE),
    (128.0, Category.STRONG),
)


@dataclass(frozen=True)
class CharacterClasses:
    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False

    def names(self) -> List[str]:
        flags = (
            (self.has_lower, "lowercase"),
            (self.has_upper, "uppercase"),
            (self.has_digit, "digits"),
            (self.has_symbol, "symbols"),
        )
        return [name for present, name in flags if present]


@dataclass
class StrengthReport:
    length: int
    classes: CharacterClasses
    charset_size: int
    entropy_bits: float
    expected_guesses: float
    category: Category
    crack_times: Tuple[float, ...]
    suggestions: List[str]

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-safe mapping; infinite values become None."""
        payload = asdict(self)
        payload["classes"] = self.classes.names()
        payload["category"] = self.category.value
        payload["entropy_bits"] = _finite_or_none(self.entropy_bits)
        payload["expected_guesses"] = _finite_or_none(self.expected_guesses)
        payload["crack_times"] = [
            {"scenario": scenario, "seconds": _finite_or_none(seconds)}
            for scenario, seconds in zip(ATTACK_SCENARIOS, self.crack_times)
        ]
        hint = CATEGORY_HINTS[self.category]
        payload["hint"] = {
            "color": hint.color,
            "emoji": hint.emoji,
            "text_color": hint.text_color,
            "percent": strength_percent(self.entropy_bits),
            # bar gradient runs from the category color to a slightly darker shade
            "bar": [hint.color, shade_color(hint.color, -10)],
        }
        return payload


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


# -------------------------- Analysis -------------------------- #


def classify(password: str) -> CharacterClasses:
    has_lower = has_upper = has_digit = has_symbol = False
    for ch in password:
        if "a" <= ch <= "z":
            has_lower = True
        elif "A" <= ch <= "Z":
            has_upper = True
        elif "0" <= ch <= "9":
            has_digit = True
        else:
            has_symbol = True
    return CharacterClasses(has_lower, has_upper, has_digit, has_symbol)


def charset_size(classes: CharacterClasses) -> int:
    size = 0
    if classes.has_lower:
        size += POOL_LOWER
    if classes.has_upper:
        size += POOL_UPPER
    if classes.has_digit:
        size += POOL_DIGITS
    if classes.has_symbol:
        size += POOL_SYMBOLS
    # Floor of 1 keeps log2 defined for the empty password
    return size or 1


def entropy_bits(length: int, charset: int) -> float:
    if length == 0:
        return 0.0
    return length * math.log2(charset)


def expected_guesses(charset: int, length: int) -> float:
    """Average brute-force attempts: half of charset**length.

    Returns math.inf when the keyspace no longer fits in a float.
    """
    try:
        return math.pow(charset, length) / 2
    except OverflowError:
        return math.inf


def categorize(bits: float) -> Category:
    for upper, category in CATEGORY_THRESHOLDS:
        if bits < upper:
            return category
    return Category.VERY_STRONG


def crack_times(guesses: float) -> Tuple[float, ...]:
    times: List[float] = []
    for speed in ATTACK_SPEEDS:
        seconds = guesses / speed
        if not math.isfinite(seconds) or seconds > CRACK_TIME_CEILING:
            seconds = math.inf
        times.append(seconds)
    return tuple(times)


def suggestions(length: int, classes: CharacterClasses) -> List[str]:
    result: List[str] = []
    if length < RECOMMENDED_LENGTH:
        result.append(f"Increase length — aim {RECOMMENDED_LENGTH}+ chars.")
    else:
        result.append("Good length — longer passphrase is better.")
    if not classes.has_lower:
        result.append("Include lowercase letters.")
    if not classes.has_upper:
        result.append("Include uppercase letters.")
    if not classes.has_digit:
        result.append("Include digits.")
    if not classes.has_symbol:
        result.append("Include symbols (!@#$%).")
    result.extend(GENERAL_ADVICE)
    return result


def analyze(password: str) -> StrengthReport:
    length = len(password)
    classes = classify(password)
    charset = charset_size(classes)
    bits = entropy_bits(length, charset)
    guesses = expected_guesses(charset, length)
    category = categorize(bits)

    logger.debug(
        "length=%d charset=%d entropy=%.2f category=%s", length, charset, bits, category
    )
    if math.isinf(guesses):
        logger.debug("expected guesses overflowed, reporting as infinite")

    return StrengthReport(
        length=length,
        classes=classes,
        charset_size=charset,
        entropy_bits=bits,
        expected_guesses=guesses,
        category=category,
        crack_times=crack_times(guesses),
        suggestions=suggestions(length, classes),
    )


# -------------------------- Presentation -------------------------- #


class StrengthHint(NamedTuple):
    color: str
    emoji: str
    text_color: str


CATEGORY_HINTS: Dict[Category, StrengthHint] = {
    Category.VERY_WEAK: StrengthHint("#e74c3c", "🔴", "white"),
    Category.WEAK: StrengthHint("#f39c12", "🟠", "white"),
    Category.REASONABLE: StrengthHint("#f1c40f", "🟡", "#222"),
    Category.STRONG: StrengthHint("#2ecc71", "🟢", "white"),
    Category.VERY_STRONG: StrengthHint("#18a689", "💪", "white"),
}

# Closest terminal color for each category
CATEGORY_ANSI: Dict[Category, str] = {
    Category.VERY_WEAK: "red",
    Category.WEAK: "red",
    Category.REASONABLE: "yellow",
    Category.STRONG: "green",
    Category.VERY_STRONG: "cyan",
}

# 128 bits fills the strength bar
FULL_STRENGTH_BITS = 128.0

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31557600


def strength_percent(bits: float) -> float:
    return min(bits / FULL_STRENGTH_BITS, 1.0) * 100


def human_number(n: float) -> str:
    """Format a count with K/M/B/T/P/E suffixes, e.g. 1500000 -> '1.50M'."""
    if not math.isfinite(n):
        return "∞"
    if n < 1000:
        return str(int(n + 0.5))
    units = ["", "K", "M", "B", "T", "P", "E"]
    i = 0
    while n >= 1000 and i < len(units) - 1:
        n /= 1000
        i += 1
    return f"{n:.2f}{units[i]}"


def format_duration(seconds: float) -> str:
    """Format seconds as '5.2 s', '3.4 min', '42.3 y' and so on."""
    if not math.isfinite(seconds) or seconds > CRACK_TIME_CEILING:
        return "∞"
    if seconds < 1:
        return f"{seconds * 1000:.1f} ms"
    if seconds < SECONDS_PER_MINUTE:
        return f"{seconds:.1f} s"
    if seconds < SECONDS_PER_HOUR:
        return f"{seconds / SECONDS_PER_MINUTE:.1f} min"
    if seconds < SECONDS_PER_DAY:
        return f"{seconds / SECONDS_PER_HOUR:.1f} h"
    if seconds < SECONDS_PER_YEAR:
        return f"{seconds / SECONDS_PER_DAY:.1f} d"
    years = seconds / SECONDS_PER_YEAR
    if years < 1000:
        return f"{years:.1f} y"
    return f"{years:.2e} y"


def shade_color(hex_color: str, percent: float) -> str:
    """Lighten (positive percent) or darken (negative) a #RRGGBB color."""
    num = int(hex_color.lstrip("#"), 16)
    delta = round(255 * percent / 100)
    channels = ((num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF)
    r, g, b = (min(255, max(0, c + delta)) for c in channels)
    return f"#{r:02x}{g:02x}{b:02x}"


def render_report(report: StrengthReport, use_color: bool) -> List[str]:
    hint = CATEGORY_HINTS[report.category]
    headline = f"Strength: {report.category} {hint.emoji} ({int(strength_percent(report.entropy_bits) + 0.5)}%)"
    lines = [colorize(headline, CATEGORY_ANSI[report.category], use_color)]
    lines.append(f"Entropy: {report.entropy_bits:.2f} bits")
    lines.append(f"Length: {report.length}")
    lines.append(f"Character classes: {', '.join(report.classes.names()) or 'none'}")
    lines.append(f"Charset size: {report.charset_size}")
    lines.append(f"Average guesses: {human_number(report.expected_guesses)}")
    lines.append("Crack times:")
    for scenario, seconds in zip(ATTACK_SCENARIOS, report.crack_times):
        lines.append(f"  - {scenario}: {format_duration(seconds)}")
    lines.append("Suggestions:")
    for s in report.suggestions:
        lines.append(f"  - {s}")
    return lines


# -------------------------- CLI -------------------------- #


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Password Strength Estimator (CLI)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--password", dest="password", help="Password value (prefer prompt or stdin)")
    source.add_argument("--stdin", action="store_true", help="Read password from STDIN")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Output JSON")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log analysis details to stderr")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def read_password(args: argparse.Namespace) -> str:
    if args.stdin:
        return safe_stdin_read()
    if args.password is not None:
        return str(args.password)
    return getpass("Enter password to evaluate: ")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.verbose)

    try:
        password = read_password(args)
    except KeyboardInterrupt:
        print()
        return 130
    except EOFError:
        print("No password provided.")
        return 2

    # Safety: prevent accidental empty strings
    if password == "":
        print("No password provided.")
        return 2

    report = analyze(password)

    if args.as_json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return 0

    use_color = not args.no_color and sys.stdout.isatty()
    for line in render_report(report, use_color):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
