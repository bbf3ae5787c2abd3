import json
import re
from dataclasses import asdict, dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple

from wizink_offers.errors import StoreIOFailure

FIELDS = ("start", "end", "url", "offer")
ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

@dataclass(frozen=True)
class Offer:
    start: str
    end: str
    url: str
    offer: str

    @property
    def key(self) -> Tuple[str, str, str]:
        return (self.start, self.end, self.url)

def is_iso_date(s: str) -> bool:
    if not ISO_DATE.fullmatch(s):
        return False
    try:
        date.fromisoformat(s)
    except ValueError:
        return False
    return True

def load_offers(db_path: str) -> List[Offer]:
    try:
        with open(db_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise StoreIOFailure(db_path, str(e)) from e

    if not isinstance(data, list):
        raise StoreIOFailure(db_path, "expected a JSON array")

    offers = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict) or not all(isinstance(entry.get(k), str) for k in FIELDS):
            raise StoreIOFailure(db_path, f"entry {i} is not a valid offer: {entry!r}")
        for k in ("start", "end"):
            if not is_iso_date(entry[k]):
                raise StoreIOFailure(db_path, f"entry {i} has a bad {k} date: {entry[k]!r}")
        offers.append(Offer(**{k: entry[k] for k in FIELDS}))
    return offers

def save_offers(db_path: str, offers: Iterable[Offer]) -> None:
    data = [asdict(o) for o in offers]
    try:
        with open(db_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
    except OSError as e:
        raise StoreIOFailure(db_path, str(e)) from e

def sort_offers(offers: Iterable[Offer]) -> List[Offer]:
    # sorted() é estável: empates em start mantêm a ordem original
    return sorted(offers, key=lambda o: o.start, reverse=True)

def merge_offers(existing: Iterable[Offer], incoming: Iterable[Optional[Offer]]) -> List[Offer]:
    merged = list(existing)
    seen = {o.key for o in merged}

    for new in incoming:
        if not isinstance(new, Offer):
            continue
        if new.key in seen:
            continue
        seen.add(new.key)
        merged.append(new)

    return sort_offers(merged)
