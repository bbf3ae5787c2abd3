import pytest
import requests

from wizink_offers import scraper
from wizink_offers.db import Offer
from wizink_offers.errors import FetchFailure, UnparsableDateRange
from wizink_offers.scraper import NO_OFFER, clean_text, extract_offer, fetch_page

URL = "https://www.wizink.pt/public/campanha-especial"

def test_extract_offer(offer_page):
    assert extract_offer(offer_page, URL) == Offer(
        start="2024-03-01", end="2024-03-15", url=URL, offer="Cartão Flash com 50€ de oferta",
    )

def test_no_offer_sentinel(no_offer_page):
    result = extract_offer(no_offer_page, URL)
    assert result is NO_OFFER
    assert not isinstance(result, Offer)

def test_missing_interval_is_unparsable():
    html = '<html><body><h2 class="offer__name">Flash</h2></body></html>'
    with pytest.raises(UnparsableDateRange):
        extract_offer(html, URL)

def test_single_day_page():
    html = """
    <div class="offer__name">Flash Extra</div>
    <div class="conditions__text"><ul><li>Só até 7 de outubro de 2024.</li></ul></div>
    """
    offer = extract_offer(html, URL)
    assert (offer.start, offer.end, offer.offer) == ("2024-10-07", "2024-10-07", "Flash Extra")

def test_clean_text():
    assert clean_text("  a \n\t b   c ") == "a b c"
    assert clean_text(None) == ""

class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code
        self.headers = {"Content-Type": "text/html; charset=utf-8"}
        self.encoding = "utf-8"

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

def test_fetch_page(monkeypatch):
    calls = {}

    def fake_get(url, headers=None, timeout=None):
        calls.update(url=url, headers=headers, timeout=timeout)
        return FakeResponse("<html>ok</html>")

    monkeypatch.setattr(scraper.requests, "get", fake_get)
    assert fetch_page(URL, timeout=5) == "<html>ok</html>"
    assert calls["url"] == URL
    assert calls["timeout"] == 5
    assert "User-Agent" in calls["headers"]

def test_fetch_page_http_error(monkeypatch):
    monkeypatch.setattr(scraper.requests, "get", lambda *a, **kw: FakeResponse(status_code=503))
    with pytest.raises(FetchFailure) as exc:
        fetch_page(URL)
    assert exc.value.url == URL

def test_fetch_page_network_error(monkeypatch):
    def boom(*a, **kw):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(scraper.requests, "get", boom)
    with pytest.raises(FetchFailure):
        fetch_page(URL)

def utf8_response(body, content_type="text/html"):
    r = requests.models.Response()
    r.status_code = 200
    r._content = body.encode("utf-8")
    r.headers["Content-Type"] = content_type
    r.encoding = requests.utils.get_encoding_from_headers(r.headers)
    return r

def test_fetch_page_without_charset_reads_utf8(monkeypatch, offer_page):
    monkeypatch.setattr(scraper.requests, "get", lambda *a, **kw: utf8_response(offer_page))
    offer = extract_offer(fetch_page(URL), URL)
    assert (offer.start, offer.end) == ("2024-03-01", "2024-03-15")
    assert offer.offer == "Cartão Flash com 50€ de oferta"

def test_fetch_page_without_charset_keeps_no_offer(monkeypatch, no_offer_page):
    monkeypatch.setattr(scraper.requests, "get", lambda *a, **kw: utf8_response(no_offer_page))
    assert extract_offer(fetch_page(URL), URL) is NO_OFFER

def test_fetch_page_respects_declared_charset(monkeypatch):
    r = requests.models.Response()
    r.status_code = 200
    r._content = "março".encode("latin-1")
    r.headers["Content-Type"] = "text/html; charset=ISO-8859-1"
    r.encoding = requests.utils.get_encoding_from_headers(r.headers)
    monkeypatch.setattr(scraper.requests, "get", lambda *a, **kw: r)
    assert fetch_page(URL) == "março"
