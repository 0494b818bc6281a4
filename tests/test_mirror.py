import csv

from notebook_monitor.mirror import FIELDNAMES, append_batch


def read_rows(path):
    with path.open(newline="", encoding="utf-8") as f:
        return list(csv.reader(f, delimiter=";"))


def test_new_file_gets_header(tmp_path, make_observation):
    target = tmp_path / "resultados.csv"

    assert append_batch([make_observation(link="https://a/1")], target)

    rows = read_rows(target)
    assert rows[0] == FIELDNAMES
    assert len(rows) == 2
    assert rows[1][0] == "2025-10-29 14:30:00"
    assert rows[1][-1] == "https://a/1"
    assert len(rows[1]) == len(FIELDNAMES)


def test_existing_file_appends_without_header(tmp_path, make_observation):
    target = tmp_path / "resultados.csv"
    append_batch([make_observation(link="https://a/1")], target)
    append_batch([make_observation(link="https://a/2"), make_observation(link="https://a/3")], target)

    rows = read_rows(target)
    assert rows.count(FIELDNAMES) == 1
    assert [row[-1] for row in rows[1:]] == ["https://a/1", "https://a/2", "https://a/3"]


def test_empty_existing_file_gets_header(tmp_path, make_observation):
    target = tmp_path / "resultados.csv"
    target.touch()

    append_batch([make_observation()], target)

    assert read_rows(target)[0] == FIELDNAMES


def test_blank_values_become_na(tmp_path, make_observation):
    target = tmp_path / "resultados.csv"

    append_batch([make_observation(preco="", gpu="")], target)

    row = dict(zip(FIELDNAMES, read_rows(target)[1]))
    assert row["preco"] == "N/A"
    assert row["gpu"] == "N/A"
    assert row["ram"] == "16GB"


def test_write_error_is_not_fatal(tmp_path, make_observation):
    # a directory cannot be opened for appending
    assert append_batch([make_observation()], tmp_path) is False


def test_empty_batch_writes_nothing(tmp_path):
    target = tmp_path / "resultados.csv"
    assert append_batch([], target) is False
    assert not target.exists()
