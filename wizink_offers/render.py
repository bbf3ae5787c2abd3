import hashlib
import os
from datetime import date, datetime, time, timezone
from html import escape
from typing import List, Optional, Sequence

from feedgen.feed import FeedGenerator

from wizink_offers.config import Settings
from wizink_offers.db import Offer

EXPIRED_COLOR = "#FFE2E2"
ACTIVE_COLOR = "#DFF5E1"

def end_of_day(day: str) -> datetime:
    return datetime.combine(date.fromisoformat(day), time(23, 59, 59), tzinfo=timezone.utc)

def start_of_day(day: str) -> datetime:
    return datetime.combine(date.fromisoformat(day), time(0, 0), tzinfo=timezone.utc)

def is_expired(offer: Offer, now: datetime) -> bool:
    return end_of_day(offer.end) < now

def offer_guid(offer: Offer) -> str:
    return hashlib.sha256(f"{offer.url}#{offer.start}".encode("utf-8")).hexdigest()

def render_html(offers: Sequence[Offer], now: datetime, settings: Optional[Settings] = None) -> str:
    settings = settings or Settings()
    title = escape(settings.feed_title)
    feed_href = escape(os.path.basename(settings.rss_path))

    rows: List[str] = []
    for o in offers:
        color = EXPIRED_COLOR if is_expired(o, now) else ACTIVE_COLOR
        rows.append(
            "\n".join(
                [
                    f'      <tr style="background-color: {color}">',
                    f"        <td>{escape(o.offer)}</td>",
                    f"        <td>{escape(o.start)}</td>",
                    f"        <td>{escape(o.end)}</td>",
                    f'        <td><a href="{escape(o.url)}" target="_blank">Link</a></td>',
                    "      </tr>",
                ]
            )
        )
    body = "\n".join(rows)

    return f"""<!DOCTYPE html>
<html lang="pt">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <link href="{feed_href}" rel="alternate" title="{title}" type="application/rss+xml">
  <title>{title}</title>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 20px; }}
    table {{ border-collapse: collapse; width: 100%; }}
    th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
    th {{ background-color: #f2f2f2; }}
  </style>
</head>
<body>
  <h1>{title} <a href="{feed_href}">[RSS]</a></h1>
  <table>
    <thead>
      <tr>
        <th>Oferta</th>
        <th>Data de inicio</th>
        <th>Data de fim</th>
        <th>URL</th>
      </tr>
    </thead>
    <tbody>
{body}
    </tbody>
  </table>
</body>
</html>
"""

def render_rss(offers: Sequence[Offer], now: datetime, settings: Optional[Settings] = None) -> str:
    settings = settings or Settings()

    fg = FeedGenerator()
    fg.title(settings.feed_title)
    fg.link(href=settings.feed_link, rel="alternate")
    fg.description(settings.feed_description)
    fg.language("pt")
    fg.lastBuildDate(now)

    for o in offers:
        # expiradas ficam só no html
        if is_expired(o, now):
            continue
        fe = fg.add_entry(order="append")
        fe.title(o.offer)
        fe.link(href=o.url)
        fe.description(f"De {o.start} a {o.end}")
        fe.pubDate(start_of_day(o.start))
        fe.guid(offer_guid(o), permalink=False)

    return fg.rss_str(pretty=True).decode("utf-8")
