"""CLI tests (scraping faked)."""

from unittest.mock import patch

import openpyxl

from conftest import FakeSource
from src.cli import main
from src.complaints import ScrapeClient


def _fake_client(source):
    def build(settings, _source=None):
        return ScrapeClient(source, failure_policy=settings.failure_policy)

    return build


def test_analyze_writes_spreadsheet(tmp_path, capsys):
    source = FakeSource()
    out = tmp_path / "out.xlsx"
    with patch("src.cli.build_client", _fake_client(source)):
        code = main(["analyze", "https://x/1", "https://x/2", "-o", str(out)])

    assert code == 0
    assert source.calls == ["https://x/1", "https://x/2"]
    ws = openpyxl.load_workbook(out).active
    assert ws.max_row == 3
    assert "Exported 2 complaint(s)" in capsys.readouterr().out


def test_analyze_reads_links_file(tmp_path):
    links = tmp_path / "links.txt"
    links.write_text("https://x/1\n\nhttps://x/2\n", encoding="utf-8")
    source = FakeSource()
    with patch("src.cli.build_client", _fake_client(source)):
        code = main(["analyze", "--file", str(links), "-o", str(tmp_path / "out.xlsx")])

    assert code == 0
    assert source.calls == ["https://x/1", "https://x/2"]


def test_analyze_without_links_refuses(tmp_path, capsys):
    with patch("src.cli.build_client", _fake_client(FakeSource())):
        code = main(["analyze", "-o", str(tmp_path / "out.xlsx")])

    assert code == 2
    assert not (tmp_path / "out.xlsx").exists()


def test_abort_policy_cli_exits_nonzero_without_file(tmp_path):
    source = FakeSource(failing={"https://x/2"})
    out = tmp_path / "out.xlsx"
    with patch("src.cli.build_client", _fake_client(source)):
        code = main(["analyze", "https://x/1", "https://x/2", "-o", str(out)])

    assert code == 1
    assert not out.exists()


def test_skip_policy_cli_exports_remaining(tmp_path):
    source = FakeSource(failing={"https://x/2"})
    out = tmp_path / "out.xlsx"
    with patch("src.cli.build_client", _fake_client(source)):
        code = main(["analyze", "https://x/1", "https://x/2", "https://x/3", "--skip-failures", "-o", str(out)])

    assert code == 0
    ws = openpyxl.load_workbook(out).active
    assert [row[0] for row in ws.iter_rows(min_row=2, values_only=True)] == ["https://x/1", "https://x/3"]


def test_links_file_blank_lines_are_ignored(tmp_path):
    links = tmp_path / "links.txt"
    links.write_text("\n\nhttps://x/1\n   \nhttps://x/2\n", encoding="utf-8")
    source = FakeSource()
    with patch("src.cli.build_client", _fake_client(source)):
        code = main(["analyze", "--file", str(links), "-o", str(tmp_path / "out.xlsx")])

    assert code == 0
    assert source.calls == ["https://x/1", "https://x/2"]
