from datetime import datetime

from notebook_monitor.models import RawListing, SpecRecord
from notebook_monitor.utils import USER_AGENTS, format_timestamp, normalize, rotate_user_agent


def test_normalize_maps_fields():
    raw = RawListing(
        site="MercadoLivre",
        query="lenovo ideapad 3",
        title="Notebook Lenovo Ideapad 3 Ryzen 5 8GB 256GB SSD",
        price="R$ 2.799",
        link="https://produto.mercadolivre.com.br/MLB-1",
    )
    specs = SpecRecord(processor="RYZEN 5", ram="8GB", storage="256GB SSD")
    ts = datetime(2025, 10, 29, 14, 30, 0)

    observation = normalize(raw, specs, ts)

    assert observation.data_hora == ts
    assert observation.site == "MercadoLivre"
    assert observation.modelo_busca == "lenovo ideapad 3"
    assert observation.titulo == raw.title
    assert observation.preco == "R$ 2.799"
    assert observation.link == raw.link
    assert observation.processador == "RYZEN 5"
    assert observation.ram == "8GB"
    assert observation.armazenamento == "256GB SSD"
    assert observation.gpu == "N/A"
    assert observation.tela == "N/A"


def test_format_timestamp():
    assert format_timestamp(datetime(2025, 1, 2, 3, 4, 5)) == "2025-01-02 03:04:05"


def test_rotate_user_agent():
    assert rotate_user_agent() in USER_AGENTS
