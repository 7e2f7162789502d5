import asyncio
import json
from pathlib import Path

import pytest

from contextpack.cli import main
from contextpack.index import DocumentIndex
from contextpack.server import create_mcp_server
from contextpack.server.mcp_server import format_size


def test_search_prints_ranked_chunks(docs_folder: Path, capsys):
    main(["search", str(docs_folder), "how do refunds work"])
    out = capsys.readouterr().out
    assert out.startswith("1. [")
    assert "Refund Policy (billing/refunds.md)" in out


def test_search_json_output(docs_zip: Path, capsys):
    main(["search", str(docs_zip), "password cookies", "--json", "-k", "1"])
    payload = json.loads(capsys.readouterr().out)
    assert len(payload) == 1
    assert payload[0]["doc_path"] == "auth/LOGIN.MD"
    assert payload[0]["score"] > 0


def test_search_without_matches(docs_folder: Path, capsys):
    main(["search", str(docs_folder), "zeppelin"])
    assert "No results found for: zeppelin" in capsys.readouterr().out


def test_info_lists_documents(docs_folder: Path, capsys):
    main(["--chunk-size", "80", "info", str(docs_folder)])
    out = capsys.readouterr().out
    assert "Documents: 2" in out
    assert "Refund Policy" in out


def test_missing_source_exits_with_error(tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        main(["info", str(tmp_path / "missing.zip")])
    assert exc_info.value.code == 1


def test_invalid_chunk_size_is_rejected(docs_folder: Path):
    with pytest.raises(SystemExit) as exc_info:
        main(["--chunk-size", "0", "info", str(docs_folder)])
    assert exc_info.value.code == 2


def test_mcp_server_registers_tools(corpus):
    index = DocumentIndex()
    index.ingest(corpus)
    mcp = create_mcp_server(index)

    tools = asyncio.run(mcp.list_tools())
    assert {tool.name for tool in tools} == {"ls", "read", "search"}


def test_format_size():
    assert format_size(512) == "512 B"
    assert format_size(2048) == "2.0 KB"
    assert format_size(3 * 1024 * 1024) == "3.0 MB"
