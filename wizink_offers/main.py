import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional

from wizink_offers.config import Settings
from wizink_offers.db import Offer, load_offers, merge_offers, save_offers
from wizink_offers.errors import FetchFailure, OutputIOFailure, StoreIOFailure, UnparsableDateRange
from wizink_offers.render import render_html, render_rss
from wizink_offers.scraper import NO_OFFER, extract_offer, fetch_page

log = logging.getLogger(__name__)

OK = "ok"
NO_OFFER_STATUS = "no_offer"
ERROR = "error"

@dataclass(frozen=True)
class PageResult:
    url: str
    status: str
    offer: Optional[Offer] = None
    error: Optional[str] = None

def process_url(url: str, settings: Settings, fetch: Callable[..., str] = fetch_page) -> PageResult:
    try:
        text = fetch(url, timeout=settings.timeout, user_agent=settings.user_agent)
        found = extract_offer(text, url, settings.months)
    except (FetchFailure, UnparsableDateRange) as e:
        return PageResult(url, ERROR, error=str(e))
    except Exception as e:
        # qualquer falha inesperada numa página não pode derrubar as outras
        return PageResult(url, ERROR, error=f"{type(e).__name__}: {e}")

    if found is NO_OFFER:
        return PageResult(url, NO_OFFER_STATUS)
    return PageResult(url, OK, offer=found)

def fetch_all(settings: Settings, fetch: Callable[..., str] = fetch_page) -> List[PageResult]:
    workers = max(1, min(settings.max_workers, len(settings.urls)))
    with ThreadPoolExecutor(max_workers=workers) as ex:
        return list(ex.map(lambda u: process_url(u, settings, fetch), settings.urls))

def write_output(out_path: str, text: str) -> None:
    try:
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise OutputIOFailure(out_path, str(e)) from e

def run(settings: Optional[Settings] = None, now: Optional[datetime] = None,
        fetch: Callable[..., str] = fetch_page) -> List[Offer]:
    settings = settings or Settings()

    offers = load_offers(settings.db_path)
    log.info("Loaded %d offers from %s", len(offers), settings.db_path)

    results = fetch_all(settings, fetch)

    incoming: List[Offer] = []
    for res in results:
        if res.status == OK:
            log.info("[%s] %s (%s a %s)", res.url, res.offer.offer, res.offer.start, res.offer.end)
            incoming.append(res.offer)
        elif res.status == NO_OFFER_STATUS:
            log.info("[%s] sem campanha de momento", res.url)
        else:
            log.warning("[%s] skipped: %s", res.url, res.error)

    merged = merge_offers(offers, incoming)
    log.info("%d new offers", len(merged) - len(offers))
    save_offers(settings.db_path, merged)

    now = now or datetime.now(timezone.utc)
    write_output(settings.html_path, render_html(merged, now, settings))
    write_output(settings.rss_path, render_rss(merged, now, settings))
    log.info("Generated %s and %s", settings.html_path, settings.rss_path)
    return merged

def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    try:
        run()
    except StoreIOFailure as e:
        log.error("Store failure: %s", e)
        return 1
    except OutputIOFailure as e:
        log.error("Output failure: %s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
