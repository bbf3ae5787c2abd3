"""
Parser de intervalos de datas em português, p.ex.:

    "1 a 15 de março de 2024"   -> ("2024-03-01", "2024-03-15")
    "5 de janeiro de 2025"      -> ("2025-01-05", "2025-01-05")
"""
import re
from datetime import date
from typing import NamedTuple, Optional, Pattern, Sequence, Tuple

from wizink_offers.config import MONTHS
from wizink_offers.errors import UnknownMonthName, UnparsableDateRange

class DateMatch(NamedTuple):
    start_day: str
    end_day: str
    month: str
    year: str

RANGE_FORM = re.compile(
    r"(?<!\d)(?P<start_day>\d{1,2}) a (?P<end_day>\d{1,2}) de (?P<month>[^\d]+?) de (?P<year>\d{4})"
)
SINGLE_DAY_FORM = re.compile(
    r"(?<!\d)(?P<day>\d{1,2}) de (?P<month>[^\d]+?) de (?P<year>\d{4})"
)

# ordem importa: a forma simples também casa com o fim de um intervalo
RULES: Tuple[Pattern[str], ...] = (RANGE_FORM, SINGLE_DAY_FORM)

def match_rule(rule: Pattern[str], phrase: str) -> Optional[DateMatch]:
    m = rule.search(phrase or "")
    if not m:
        return None
    g = m.groupdict()
    start_day = g.get("start_day") or g["day"]
    end_day = g.get("end_day") or g["day"]
    return DateMatch(start_day, end_day, g["month"], g["year"])

def resolve_month(name: str, months: Sequence[str] = MONTHS, phrase: str = "") -> int:
    key = (name or "").strip().lower()
    try:
        return months.index(key) + 1
    except ValueError:
        raise UnknownMonthName(phrase or name, name.strip()) from None

def _iso(year: str, month: int, day: str, phrase: str) -> str:
    try:
        return date(int(year), month, int(day)).isoformat()
    except ValueError as e:
        raise UnparsableDateRange(phrase, reason=str(e)) from e

def parse_date_range(phrase: str, months: Sequence[str] = MONTHS) -> Tuple[str, str]:
    for rule in RULES:
        m = match_rule(rule, phrase)
        if m is None:
            continue

        month = resolve_month(m.month, months, phrase)
        start = _iso(m.year, month, m.start_day, phrase)
        end = _iso(m.year, month, m.end_day, phrase)
        if end < start:
            raise UnparsableDateRange(phrase, reason="end day before start day")
        return start, end

    raise UnparsableDateRange(phrase)
