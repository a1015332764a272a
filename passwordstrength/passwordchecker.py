#!/usr/bin/env python3
"""
Password strength estimator.

Brute-force model only: entropy comes from the size of the character
classes a password draws from, crack times assume an attacker enumerating
that whole space. Nothing here validates or enforces a password policy.
"""
import json
import math
import re
import sys
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from getpass import getpass
from typing import Callable, Dict, Mapping, NamedTuple, Optional, Tuple

CHARSET_SIZES = {
    "lowercase": 26,
    "uppercase": 26,
    "digits": 10,
    "symbols": 32,  # nominal, whatever symbols actually appear
}

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^a-zA-Z0-9]")


class AttackerTier(NamedTuple):
    key: str
    name: str
    speed: int  # guesses per second


ATTACKER_TIERS = (
    AttackerTier("online_throttled", "Online Attack (Throttled)", 10),
    AttackerTier("consumer_gpu", "Consumer GPU", 10**9),
    AttackerTier("cloud_cluster", "Cloud GPU Cluster", 10**11),
    AttackerTier("massive_botnet", "Massive Botnet", 10**13),
)

SECONDS_PER_YEAR = 31536000

# (exclusive upper bound, divisor, unit) in seconds, first match wins
_TIME_LADDER = (
    (60, 1, " seconds"),
    (3600, 60, " minutes"),
    (86400, 3600, " hours"),
    (SECONDS_PER_YEAR, 86400, " days"),
    (SECONDS_PER_YEAR * 100, SECONDS_PER_YEAR, " years"),
    (SECONDS_PER_YEAR * 10**6, SECONDS_PER_YEAR * 10**3, "K years"),
    (SECONDS_PER_YEAR * 10**9, SECONDS_PER_YEAR * 10**6, "M years"),
    (SECONDS_PER_YEAR * 10**12, SECONDS_PER_YEAR * 10**9, "B years"),
)

_NUMBER_LADDER = (
    (10**6, 10**3, "K"),
    (10**9, 10**6, "M"),
    (10**12, 10**9, "B"),
    (10**15, 10**12, "T"),
    (10**18, 10**15, "Q"),
)


class Strength(str, Enum):
    VERY_WEAK = "very-weak"
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @property
    def rank(self) -> int:
        return list(Strength).index(self)

    @property
    def label(self) -> str:
        return " ".join(w.capitalize() for w in self.value.split("-"))

    # declaration order, not the alphabetical order of the str values
    def __lt__(self, other):
        if not isinstance(other, Strength):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Strength):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Strength):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Strength):
            return NotImplemented
        return self.rank >= other.rank


# (exclusive upper bound in bits, category); anything above is very strong
_STRENGTH_THRESHOLDS = (
    (28, Strength.VERY_WEAK),   # < 268M combinations
    (36, Strength.WEAK),        # < 68B combinations
    (60, Strength.MODERATE),    # < 1 quintillion
    (80, Strength.STRONG),      # < 1.2 nonillion
)


class CharsetProfile(NamedTuple):
    lowercase: bool
    uppercase: bool
    digits: bool
    symbols: bool

    @property
    def size(self) -> int:
        s = sum(CHARSET_SIZES[name] for name, present in self._asdict().items() if present)
        return s or 1


def charset_profile(pw: str) -> CharsetProfile:
    return CharsetProfile(
        lowercase=bool(_LOWER.search(pw)),
        uppercase=bool(_UPPER.search(pw)),
        digits=bool(_DIGIT.search(pw)),
        symbols=bool(_SYMBOL.search(pw)),
    )


def char_space_size(pw: str) -> int:
    return charset_profile(pw).size


def entropy_bits(length: int, charset_size: int) -> float:
    # log form; charset_size ** length overflows a float past ~150 chars
    if length <= 0 or charset_size <= 1:
        return 0.0
    return length * math.log2(charset_size)


def combination_count(length: int, charset_size: int) -> int:
    return charset_size ** max(length, 0)


def _fixed(value, places: int = 1) -> str:
    """Exact decimal rendering of a non-negative rational, rounded half up."""
    value = Fraction(value)
    scale = 10**places
    scaled = (value.numerator * scale * 2 + value.denominator) // (value.denominator * 2)
    if not places:
        return str(scaled)
    whole, frac = divmod(scaled, scale)
    return f"{whole}.{frac:0{places}d}"


def format_large_number(num) -> str:
    if num < 1000:
        return _fixed(num, 0)
    for limit, divisor, suffix in _NUMBER_LADDER:
        if num < limit:
            return _fixed(Fraction(num) / divisor) + suffix
    return ">" + _fixed(Fraction(num) / 10**18, 0) + "Qi"


def format_crack_time(seconds) -> str:
    if seconds < 1:
        return "Instant"
    for limit, divisor, unit in _TIME_LADDER:
        if seconds < limit:
            return _fixed(Fraction(seconds) / divisor) + unit
    return "Universe lifetime+"


def crack_times(combinations: int, tiers=ATTACKER_TIERS) -> Dict[str, str]:
    # Average case: the attacker hits the password after searching half the
    # space. A modelling assumption, not a bound.
    return {
        tier.name: format_crack_time(Fraction(combinations, 2 * tier.speed))
        for tier in tiers
    }


def classify_entropy(bits: float) -> Strength:
    for limit, strength in _STRENGTH_THRESHOLDS:
        if bits < limit:
            return strength
    return Strength.VERY_STRONG


_SEQUENCES = re.compile(r"012|123|234|345|456|567|678|789|abc|bcd|cde|def", re.IGNORECASE)
_COMMON_WORDS = ("password", "admin")

SuggestionRule = Tuple[Callable[[str, float], bool], str]

SUGGESTION_RULES: Tuple[SuggestionRule, ...] = (
    (lambda pw, bits: len(pw) < 12,
     "Increase length to at least 12 characters (longer is better)"),
    (lambda pw, bits: not _LOWER.search(pw), "Add lowercase letters"),
    (lambda pw, bits: not _UPPER.search(pw), "Add uppercase letters"),
    (lambda pw, bits: not _DIGIT.search(pw), "Add numbers"),
    (lambda pw, bits: not _SYMBOL.search(pw), "Add special characters (!@#$%^&*)"),
    (lambda pw, bits: re.search(r"(.)\1{2,}", pw) is not None,
     "Avoid repeating characters (aaa, 111)"),
    (lambda pw, bits: re.fullmatch(r"[a-zA-Z]+", pw) is not None,
     "Don't use only letters - mix character types"),
    (lambda pw, bits: re.fullmatch(r"[0-9]+", pw) is not None,
     "Don't use only numbers - add letters and symbols"),
    (lambda pw, bits: _SEQUENCES.search(pw) is not None,
     "Avoid sequential patterns (123, abc)"),
    (lambda pw, bits: any(w in pw.lower() for w in _COMMON_WORDS),
     "Never use common words like 'password' or 'admin'"),
    (lambda pw, bits: bits >= 80,
     "✓ Excellent! This is a very strong password"),
    (lambda pw, bits: 60 <= bits < 80,
     "Good strength, but consider making it even longer"),
)


def generate_suggestions(pw: str, bits: float) -> Tuple[str, ...]:
    return tuple(message for check, message in SUGGESTION_RULES if check(pw, bits))


class Analysis(NamedTuple):
    length: int
    charset: CharsetProfile
    charset_size: int
    entropy_bits: float
    combination_count: int
    guess_space: str
    crack_times: Mapping[str, str]  # read-only view
    strength: Strength
    suggestions: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "length": self.length,
            "charset": self.charset._asdict(),
            "charset_size": self.charset_size,
            "entropy_bits": self.entropy_bits,
            "guess_space": self.guess_space,
            "crack_times": dict(self.crack_times),
            "strength": self.strength.value,
            "strength_label": self.strength.label,
            "suggestions": list(self.suggestions),
        }


def analyze(pw: str) -> Optional[Analysis]:
    if not pw:
        return None
    charset = charset_profile(pw)
    size = charset.size
    bits = entropy_bits(len(pw), size)
    combinations = combination_count(len(pw), size)
    return Analysis(
        length=len(pw),
        charset=charset,
        charset_size=size,
        entropy_bits=bits,
        combination_count=combinations,
        guess_space=format_large_number(combinations),
        crack_times=MappingProxyType(crack_times(combinations)),
        strength=classify_entropy(bits),
        suggestions=generate_suggestions(pw, bits),
    )


def sanitized_report(pw: str) -> Optional[dict]:
    """Analysis as plain JSON-ready data. The raw password is never included."""
    result = analyze(pw)
    if result is None:
        return None
    report = result.to_dict()
    report["entropy_bits"] = round(result.entropy_bits, 2)
    return report


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    pw = argv[0] if argv else getpass("Password to analyze: ")
    print(json.dumps(sanitized_report(pw), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
