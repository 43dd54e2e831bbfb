from __future__ import annotations

import pytest

from gnormalizer.config import ENV_COMMENT_CHARS, ENV_ID_BASE, ParserConfig
from gnormalizer.parsers.edge_list import EdgeListParser


@pytest.fixture
def parser() -> EdgeListParser:
    """Fresh parser session with default configuration."""
    return EdgeListParser()


@pytest.fixture
def parser_config() -> ParserConfig:
    return ParserConfig(comment_chars=("#", ";"), id_base=0)


@pytest.fixture
def clean_env(monkeypatch):
    """
    Make sure GNORMALIZER_* variables are unset, and that anything a dotenv
    file sets during the test is removed afterwards.
    """
    for var in (ENV_COMMENT_CHARS, ENV_ID_BASE):
        monkeypatch.setenv(var, "placeholder")
        monkeypatch.delenv(var)
    return monkeypatch


@pytest.fixture
def edge_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(
        "# friendship graph\n"
        "alice bob\n"
        "\n"
        "bob\tcarol\n"
        "% exported by hand\n"
        "  carol    alice  \n"
        "dave dave\n",
        encoding="utf-8",
    )
    return path
