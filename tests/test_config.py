"""
Configuration.

Asserts:
  • defaults validate
  • invalid comment markers and id bases raise ConfigError
  • load_config reads GNORMALIZER_* from the environment and dotenv files
"""
import pytest

from gnormalizer.config import (
    DEFAULT_COMMENT_CHARS,
    ENV_COMMENT_CHARS,
    ENV_ID_BASE,
    ParserConfig,
    load_config,
)
from gnormalizer.errors import ConfigError
from gnormalizer.parsers.edge_list import EdgeListParser


def test_defaults_validate():
    cfg = ParserConfig().validate()
    assert cfg.comment_chars == DEFAULT_COMMENT_CHARS
    assert cfg.id_base == 0


@pytest.mark.parametrize("chars", [("##",), ("",), (" ",), ("\t",)])
def test_bad_comment_markers(chars):
    with pytest.raises(ConfigError) as exc_info:
        ParserConfig(comment_chars=chars).validate()
    assert exc_info.value.code == "BAD_CONFIG"


@pytest.mark.parametrize("base", [-1, True, 1.5])
def test_bad_id_base(base):
    with pytest.raises(ConfigError):
        ParserConfig(id_base=base).validate()


def test_parser_validates_its_config():
    with pytest.raises(ConfigError):
        EdgeListParser(ParserConfig(comment_chars=("ab",)))


def test_parser_uses_configured_markers(parser_config):
    parser = EdgeListParser(parser_config)
    assert parser.comment_chars == ("#", ";")
    assert len(parser.parse(["; skipped", "%a b"])) == 1
    assert parser.snapshot_mappings() == [("%a", 0), ("b", 1)]


def test_load_config_defaults(clean_env, tmp_path):
    env_file = tmp_path / "empty.env"
    env_file.write_text("", encoding="utf-8")
    cfg = load_config(str(env_file))
    assert cfg == ParserConfig()


def test_load_config_from_environment(clean_env):
    clean_env.setenv(ENV_COMMENT_CHARS, "!;")
    clean_env.setenv(ENV_ID_BASE, "5")
    cfg = load_config()
    assert cfg.comment_chars == ("!", ";")
    assert cfg.id_base == 5


def test_load_config_from_dotenv_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{ENV_COMMENT_CHARS}=#\n{ENV_ID_BASE}=1\n", encoding="utf-8")
    cfg = load_config(str(env_file))
    assert cfg.comment_chars == ("#",)
    assert cfg.id_base == 1


def test_load_config_rejects_non_integer_base(clean_env):
    clean_env.setenv(ENV_ID_BASE, "one")
    with pytest.raises(ConfigError):
        load_config()
