import pytest

import notebook_monitor.parser as parser_module
from notebook_monitor.models import SpecRecord
from notebook_monitor.parser import SpecParser, extract_specs


def test_asus_title_with_ram_label():
    specs = extract_specs("Notebook Asus Vivobook 15 Intel i5-1235U 16GB RAM 512GB SSD Tela 15.6'' ")
    assert specs == SpecRecord(
        processor="I5-1235U",
        ram="16GB",
        storage="512GB SSD",
        gpu="N/A",
        screen='15.6"',
    )


def test_lenovo_ryzen_title_without_ram_label():
    specs = extract_specs("Notebook Lenovo Ryzen 5 8GB 256GB SSD RTX 3050 15.6 polegadas")
    assert specs == SpecRecord(
        processor="RYZEN 5",
        ram="8GB",
        storage="256GB SSD",
        gpu="RTX",
        screen='15.6"',
    )


def test_bare_ram_size_uses_fallback():
    specs = extract_specs("Notebook Positivo Motion 8GB Windows 11")
    assert specs.ram == "8GB"
    assert specs.processor == "N/A"
    assert specs.gpu == "N/A"
    assert specs.screen == "N/A"


def test_ram_label_preferred_over_earlier_storage_size():
    specs = extract_specs("Notebook Dell 512GB 8GB RAM")
    assert specs.ram == "8GB"
    assert specs.storage == "512GB"


def test_ram_label_with_de():
    specs = extract_specs("Notebook Acer 16GB DE RAM SSD 1TB")
    assert specs.ram == "16GB"
    assert specs.storage == "1TB"


def test_ram_fallback_looks_at_whole_remainder():
    # 8GB is followed somewhere later by "SSD", so the fallback skips it
    assert SpecParser.extract_ram("Notebook 8GB 256GB SSD 4GB") == "4GB"


def test_title_without_patterns_is_all_na():
    assert extract_specs("Mochila para notebook preta") == SpecRecord()


@pytest.mark.parametrize("title", ["", "!!!@@@###", "   ", "x" * 10000 + " 16GB RAM"])
def test_extract_never_raises(title):
    specs = extract_specs(title)
    assert isinstance(specs, SpecRecord)
    assert all(isinstance(value, str) and value for value in specs.model_dump().values())


def test_long_title_still_extracts():
    assert extract_specs("x" * 10000 + " 16GB RAM").ram == "16GB"


def test_processor_suffix_with_spaces():
    assert SpecParser.extract_processor("Notebook Gamer Core i7 - 13620H") == "I7 - 13620H"


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Notebook Gamer AMD Radeon RX 6500M", "AMD RADEON"),
        ("Notebook Intel Iris Xe", "IRIS XE"),
        ("Notebook Intel UHD Graphics", "UHD GRAPHICS"),
        ("Notebook Acer Nitro GTX 1650", "GTX"),
    ],
)
def test_gpu_families(title, expected):
    assert SpecParser.extract_gpu(title) == expected


def test_storage_hd_and_tb():
    assert SpecParser.extract_storage("Notebook 4GB RAM 1TB HD") == "1TB HD"


def test_screen_pol():
    assert SpecParser.extract_screen("Notebook Samsung Book 14 pol") == '14"'


def test_failing_field_does_not_affect_others(monkeypatch):
    def broken(title):
        raise RuntimeError("boom")

    extractors = tuple(
        (field, broken if field == "gpu" else extractor)
        for field, extractor in parser_module.FIELD_EXTRACTORS
    )
    monkeypatch.setattr(parser_module, "FIELD_EXTRACTORS", extractors)

    specs = extract_specs("Notebook Lenovo Ryzen 5 8GB 256GB SSD RTX 3050 15.6 polegadas")
    assert specs.gpu == "N/A"
    assert specs.processor == "RYZEN 5"
    assert specs.storage == "256GB SSD"
    assert specs.screen == '15.6"'
