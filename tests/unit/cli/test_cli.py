"""Tests for the command line interface."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import pytest

from solrquery import cli
from solrquery.client import SolrResponse
from solrquery.client import client as client_module
from solrquery.exceptions import SolrConnectionError

_CONFIG = """\
endpoints:
  default:
    url: http://localhost:8983/solr/gettingstarted
  suggester:
    url: http://localhost:8983/solr/collection
    handler: suggest
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "solrquery.yaml"
    path.write_text(_CONFIG)
    return path


class _FakeSolrClient:
    """Stands in for ``SolrClient``; records searches and replies with a canned response."""

    calls: list[tuple[Any, Any]] = []
    response = SolrResponse(status_code=200, body='{"response":{"numFound":0}}', url="http://solr/select?q=loch")
    error: Exception | None = None

    def __init__(self, settings: Any, **kwargs: Any) -> None:
        self.settings = settings

    def search(self, query: Any, endpoint: Any = None) -> SolrResponse:
        type(self).calls.append((query, endpoint))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch) -> type[_FakeSolrClient]:
    monkeypatch.setattr(_FakeSolrClient, "calls", [])
    monkeypatch.setattr(client_module, "SolrClient", _FakeSolrClient)
    return _FakeSolrClient


class TestParseParams:
    def test_pairs_in_order(self) -> None:
        assert cli.parse_params(["q=loch", "fq=type:book", "fq=year:2001"]) == [
            ("q", "loch"),
            ("fq", "type:book"),
            ("fq", "year:2001"),
        ]

    def test_value_may_contain_equals(self) -> None:
        assert cli.parse_params(["q={!q.op=OR}black amber"]) == [("q", "{!q.op=OR}black amber")]

    def test_empty_value_allowed(self) -> None:
        assert cli.parse_params(["fq="]) == [("fq", "")]

    @pytest.mark.parametrize("item", ["loch", "=loch"])
    def test_rejects_bad_items(self, item: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_params([item])


class TestDryRun:
    def test_prints_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = cli.main(["--dry-run", "-e", "http://localhost:8983/solr/films", "q=loch torridon", "rows=5"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "http://localhost:8983/solr/films/select?q=loch+torridon&rows=5"

    def test_named_endpoint(self, config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = cli.main(["-c", str(config_file), "-e", "suggester", "--dry-run", "suggest.q=el"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "http://localhost:8983/solr/collection/suggest?suggest.q=el"

    def test_default_endpoint(self, config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["-c", str(config_file), "--dry-run", "q=*"]) == 0
        assert capsys.readouterr().out.strip() == "http://localhost:8983/solr/gettingstarted/select?q=%2A"

    def test_no_params(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--dry-run", "-e", "http://localhost:8983/solr/films"]) == 1
        assert "Malformed query" in capsys.readouterr().err

    def test_only_empty_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--dry-run", "-e", "http://localhost:8983/solr/films", "q=", "fq="]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Malformed query" in captured.err

    def test_unknown_endpoint(self, config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["-c", str(config_file), "-e", "films", "--dry-run", "q=loch"]) == 1
        assert "Error: Endpoint 'films' is not configured" in capsys.readouterr().err


class TestSearch:
    def test_sends_search(
        self, config_file: Path, fake_client: type[_FakeSolrClient], capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = cli.main(["-c", str(config_file), "-e", "suggester", "q=loch", "fq=a", "fq=b"])

        assert code == 0
        assert fake_client.calls == [([("q", "loch"), ("fq", "a"), ("fq", "b")], "suggester")]
        captured = capsys.readouterr()
        assert captured.out.strip() == '{"response":{"numFound":0}}'
        assert "HTTP 200 http://solr/select?q=loch" in captured.err

    def test_error_status_exit_code(
        self, fake_client: type[_FakeSolrClient], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(fake_client, "response", SolrResponse(status_code=500, body="boom"))
        assert cli.main(["-e", "http://localhost:8983/solr/films", "q=loch"]) == 1

    def test_connection_error(
        self,
        fake_client: type[_FakeSolrClient],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(fake_client, "error", SolrConnectionError("Failed to reach Solr"))
        assert cli.main(["-e", "http://localhost:8983/solr/films", "q=loch"]) == 1
        assert "Error: Failed to reach Solr" in capsys.readouterr().err


class TestArguments:
    def test_missing_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["-c", str(tmp_path / "missing.yaml"), "q=loch"]) == 1
        assert "Error: Config file not found" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "solrquery.yaml"
        path.write_text("endpoints:\n  default:\n    handler: select\n")

        assert cli.main(["-c", str(path), "--dry-run", "q=loch"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Invalid configuration")
        assert "url" in err

    def test_unparseable_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "solrquery.yaml"
        path.write_text("endpoints: [unclosed\n")

        assert cli.main(["-c", str(path), "--dry-run", "q=loch"]) == 1
        assert capsys.readouterr().err.startswith("Error: Invalid configuration")

    def test_bad_param_exits(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--dry-run", "loch"])
        assert exc_info.value.code == 2

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            cli.main(["--version"])
        assert "solrquery 0.1.0" in capsys.readouterr().out
