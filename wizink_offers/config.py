from dataclasses import dataclass
from typing import Tuple

UA = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122 Safari/537.36"

URLS = (
    "https://www.wizink.pt/mail/landing/aderir-cartao-de-credito-flash.html",
    "https://www.wizink.pt/mail/landing/aderir-cartao-de-credito-flash-extra.html",
    "https://www.wizink.pt/mail/landing/aderir-cartao-de-credito-flash-especial.html",
    "https://www.wizink.pt/mail/landing/aderir-cartao-de-credito-wizink-flex-flash.html",
    "https://www.wizink.pt/public/campanha-especial",
)

MONTHS = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)

@dataclass(frozen=True)
class Settings:
    urls: Tuple[str, ...] = URLS
    months: Tuple[str, ...] = MONTHS
    db_path: str = "db.json"
    html_path: str = "index.html"
    rss_path: str = "rss.xml"
    timeout: int = 30
    max_workers: int = 5
    user_agent: str = UA
    feed_title: str = "Ofertas Wizink"
    feed_link: str = "https://wizink.pt"
    feed_description: str = "Ofertas Wizink"
