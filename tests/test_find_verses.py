# tests/test_find_verses.py
"""
Tests for the find-verses command line script.
"""

import io
import json

import pytest

from bible_refs.scripts import find_verses
from bible_refs.services.references import ReferenceService, VerseApiFailure


@pytest.fixture
def cli(config, make_api, monkeypatch):
    """Point the script at a FakeVerseApi; returns the fakes it creates."""
    fakes = []

    def service_factory(cfg):
        fake = make_api(failures={"/verses/acf/sl/23": VerseApiFailure})
        fakes.append(fake)
        return ReferenceService(cfg, fetcher=fake)

    monkeypatch.setattr(find_verses, "load_config", lambda: config)
    monkeypatch.setattr(find_verses, "ReferenceService", service_factory)
    return fakes


def test_prints_verses(cli, capsys):
    assert find_verses.main(["Joao 1:1-3 kjv"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == ["jo 1:1", "jo 1:2", "jo 1:3"]
    assert cli[0].closed


def test_version_option(cli, capsys):
    find_verses.main(["--version", "nvi", "Romanos 8:28"])
    assert cli[0].calls == ["/verses/nvi/rm/8/28"]


def test_failed_reference_exit_code(cli, capsys):
    assert find_verses.main(["Salmos 23 e João 3:16"]) == 1

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["jo 3:16"]
    assert "[Salmos 23: Failure]" in captured.err


def test_no_references(cli, capsys):
    assert find_verses.main(["bom dia"]) == 2
    assert "No references found." in capsys.readouterr().err


def test_json_output(cli, capsys):
    assert find_verses.main(["--json", "Genesis 1:1"]) == 0

    results = json.loads(capsys.readouterr().out)
    assert results[0]["book_name"] == "Gênesis"
    assert results[0]["verses"] == [{"number": 1, "text": "gn 1:1"}]


def test_detect_only(cli, capsys):
    assert find_verses.main(["--detect-only", "John 3:16 e Salmos 23 kjv"]) == 0

    assert capsys.readouterr().out.splitlines() == ["John 3:16", "Salmos 23 kjv"]
    assert cli[0].calls == []


def test_reads_stdin(cli, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Apocalipse 22:21\n"))
    assert find_verses.main([]) == 0
    assert capsys.readouterr().out.strip() == "ap 22:21"
