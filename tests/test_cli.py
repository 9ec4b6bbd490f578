import json

import httpx
from typer.testing import CliRunner

from address_book import cli
from address_book.remote import AddressLookupClient
from address_book.validation import SEARCH_FIELDS_MESSAGE

runner = CliRunner()

PAYLOAD = {
    "status": "ok",
    "details": [
        {"city": "Town", "lat": 52.1, "long": 4.3, "postcode": "1000AB", "street": "Main"},
    ],
}


def _patch_client(monkeypatch, handler) -> None:
    def make_client(base_url):
        return AddressLookupClient(
            base_url=base_url or "http://test",
            transport=httpx.MockTransport(handler),
        )

    monkeypatch.setattr(cli, "_make_client", make_client)


def test_lookup_prints_candidates(monkeypatch) -> None:
    _patch_client(monkeypatch, lambda request: httpx.Response(200, json=PAYLOAD))

    result = runner.invoke(cli.app, ["lookup", "1000AB", "12"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {
            "id": "52.1_4.3",
            "street": "Main",
            "city": "Town",
            "postcode": "1000AB",
            "houseNumber": "12",
            "lat": "52.1",
            "lon": "4.3",
            "firstName": "",
            "lastName": "",
        }
    ]


def test_lookup_reports_http_failure(monkeypatch) -> None:
    _patch_client(monkeypatch, lambda request: httpx.Response(500, text="boom"))

    result = runner.invoke(cli.app, ["lookup", "1000AB", "12"])

    assert result.exit_code == 1
    assert "Lookup failed: 500: boom" in result.stdout


def test_lookup_requires_search_fields(monkeypatch) -> None:
    calls: list[str] = []
    _patch_client(monkeypatch, lambda request: calls.append("called") or httpx.Response(200))

    result = runner.invoke(cli.app, ["lookup", "", "12"])

    assert result.exit_code == 1
    assert SEARCH_FIELDS_MESSAGE in result.stdout
    assert calls == []
