import re
from typing import Optional, Sequence, Union

import requests
from bs4 import BeautifulSoup

from wizink_offers.config import MONTHS, UA
from wizink_offers.dates import parse_date_range
from wizink_offers.db import Offer
from wizink_offers.errors import FetchFailure

NO_CAMPAIGN = re.compile(r"não temos nenhuma campanha especial, de momento", re.I)

OFFER_NAME_SELECTOR = ".offer__name"
INTERVAL_SELECTOR = ".conditions__text > ul > li"

class _NoOffer:
    """Página válida, mas sem campanha ativa."""

    def __repr__(self) -> str:
        return "NO_OFFER"

    def __bool__(self) -> bool:
        return False

NO_OFFER = _NoOffer()

def clean_text(s: Optional[str]) -> str:
    return re.sub(r"\s+", " ", s or "").strip()

def fetch_page(url: str, timeout: int = 30, user_agent: str = UA) -> str:
    try:
        r = requests.get(
            url,
            headers={"User-Agent": user_agent, "Accept-Language": "pt-PT,pt;q=0.9"},
            timeout=timeout,
        )
        r.raise_for_status()
    except requests.RequestException as e:
        raise FetchFailure(url, str(e)) from e

    # sem charset no header o requests assume ISO-8859-1 e estraga "março"
    if "charset" not in r.headers.get("Content-Type", "").lower():
        r.encoding = "utf-8"
    return r.text

def has_no_campaign(text: str) -> bool:
    return bool(NO_CAMPAIGN.search(text or ""))

def extract_offer(page_text: str, url: str, months: Sequence[str] = MONTHS) -> Union[Offer, _NoOffer]:
    if has_no_campaign(page_text):
        return NO_OFFER

    soup = BeautifulSoup(page_text, "lxml")

    name_el = soup.select_one(OFFER_NAME_SELECTOR)
    offer = clean_text(name_el.get_text() if name_el else "")

    # só o primeiro item da lista de condições traz as datas
    li = soup.select_one(INTERVAL_SELECTOR)
    interval = clean_text(li.get_text() if li else "")

    start, end = parse_date_range(interval, months)
    return Offer(start=start, end=end, url=url, offer=offer)
