from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from gnormalizer.errors import ConfigError

ENV_COMMENT_CHARS = "GNORMALIZER_COMMENT_CHARS"
ENV_ID_BASE = "GNORMALIZER_ID_BASE"

DEFAULT_COMMENT_CHARS: Tuple[str, ...] = ("#", "%", "/")


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration container for an edge-list parser session.

    The comment markers are single characters; a trimmed line starting
    with any of them is ignored. Identifiers are assigned contiguously
    starting at `id_base`.
    """

    comment_chars: Tuple[str, ...] = DEFAULT_COMMENT_CHARS
    id_base: int = 0

    def validate(self) -> "ParserConfig":
        """
        Check the configuration for consistency.

        Returns:
            ParserConfig: The same instance, to allow chaining.

        Raises:
            ConfigError: If a comment marker is not a single non-whitespace
            character, or the identifier base is negative.
        """
        for c in self.comment_chars:
            if not isinstance(c, str) or len(c) != 1 or c.isspace():
                raise ConfigError(
                    f"Comment markers must be single non-whitespace characters, got {c!r}",
                    details={"comment_chars": list(self.comment_chars)},
                )
        if isinstance(self.id_base, bool) or not isinstance(self.id_base, int) or self.id_base < 0:
            raise ConfigError(
                f"Identifier base must be a non-negative integer, got {self.id_base!r}",
            )
        return self


@dataclass
class NormalizeConfig:
    """
    Tunables for the file normalization pipeline.
    """

    # input
    encoding: str = "utf-8-sig"

    # output
    output_encoding: str = "utf-8"
    mappings_delimiter: str = ","

    # logging
    verbose: bool = True

    parser: ParserConfig = field(default_factory=ParserConfig)


def load_config(env_file: Optional[str] = None) -> ParserConfig:
    """
    Build a parser configuration from environment variables.

    This function loads a `.env` file (when present) and reads the
    comment markers and identifier base from the environment. Variables
    that are unset or empty fall back to the dataclass defaults.

    Args:
        env_file (Optional[str]): Explicit path to a dotenv file. When
            omitted, dotenv searches upwards from the working directory.

    Returns:
        ParserConfig: Validated parser configuration.
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    comment_chars = DEFAULT_COMMENT_CHARS
    raw_chars = os.getenv(ENV_COMMENT_CHARS)
    if raw_chars:
        comment_chars = tuple(raw_chars)

    id_base = 0
    raw_base = os.getenv(ENV_ID_BASE)
    if raw_base is not None and raw_base.strip() != "":
        try:
            id_base = int(raw_base.strip())
        except ValueError as e:
            raise ConfigError(f"{ENV_ID_BASE} must be an integer, got {raw_base!r}") from e

    return ParserConfig(comment_chars=comment_chars, id_base=id_base).validate()
