import pytest

from wizink_offers.config import Settings
from wizink_offers.db import Offer

OFFER_PAGE = """
<html>
<body>
  <div class="offer">
    <h2 class="offer__name">
      Cartão Flash   com
      50€ de oferta
    </h2>
    <h2 class="offer__name">Outro nome</h2>
  </div>
  <div class="conditions__text">
    <ul>
      <li>Campanha válida de 1 a 15 de Março de 2024,
          para novas adesões.</li>
      <li>Limitado a 9 de abril de 2024.</li>
    </ul>
  </div>
</body>
</html>
"""

NO_OFFER_PAGE = """
<html><body>
  <p>Lamentamos, mas NÃO TEMOS NENHUMA CAMPANHA ESPECIAL, DE MOMENTO.</p>
</body></html>
"""

@pytest.fixture
def offer_page():
    return OFFER_PAGE

@pytest.fixture
def no_offer_page():
    return NO_OFFER_PAGE

@pytest.fixture
def make_offer():
    def _make(start="2024-03-01", end="2024-03-15", url="https://example.pt/a", offer="Oferta"):
        return Offer(start=start, end=end, url=url, offer=offer)
    return _make

@pytest.fixture
def settings(tmp_path):
    return Settings(
        urls=("https://example.pt/a", "https://example.pt/b", "https://example.pt/c"),
        db_path=str(tmp_path / "db.json"),
        html_path=str(tmp_path / "index.html"),
        rss_path=str(tmp_path / "rss.xml"),
    )
