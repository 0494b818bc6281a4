from datetime import datetime

import pytest

from notebook_monitor.database import Database
from notebook_monitor.models import Observation

BATCH_TIME = datetime(2025, 10, 29, 14, 30, 0)


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "produtos.db"


@pytest.fixture()
def store(db_path):
    database = Database(db_path)
    database.open()
    yield database
    database.close()


@pytest.fixture()
def make_observation():
    def _make(link="https://www.amazon.com.br/dp/A1", preco="R$ 3.499,90", data_hora=BATCH_TIME, **overrides):
        fields = {
            "data_hora": data_hora,
            "site": "Amazon",
            "modelo_busca": "asus vivobook 15",
            "titulo": "Notebook Asus Vivobook 15 Intel i5-1235U 16GB RAM 512GB SSD",
            "preco": preco,
            "processador": "I5-1235U",
            "ram": "16GB",
            "armazenamento": "512GB SSD",
            "gpu": "N/A",
            "tela": "N/A",
            "link": link,
        }
        fields.update(overrides)
        return Observation(**fields)

    return _make
