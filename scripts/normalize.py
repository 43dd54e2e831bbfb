from __future__ import annotations

import argparse
import logging

from gnormalizer.config import NormalizeConfig, ParserConfig, load_config
from gnormalizer.errors import ConfigError, MalformedLineError
from gnormalizer.pipeline.normalize_edges import run_normalize
from gnormalizer.utils.paths import default_output_paths


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Normalize an edge list into integer ids + label mappings")
    ap.add_argument("input", help="Edge-list file (two whitespace-separated labels per line)")
    ap.add_argument("--edges", help="Output edge list (default: <input>_edges.txt)")
    ap.add_argument("--mappings", help="Output mapping table (default: <input>_mappings.csv)")
    ap.add_argument("--comment-chars", help="Comment marker characters, e.g. '#%%'")
    ap.add_argument("--id-base", type=int, help="First identifier to assign")
    ap.add_argument("--env-file", help="dotenv file with GNORMALIZER_* settings")
    ap.add_argument("--quiet", action="store_true", help="Only print errors")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        parser_cfg = load_config(args.env_file)
        parser_cfg = ParserConfig(
            comment_chars=tuple(args.comment_chars) if args.comment_chars else parser_cfg.comment_chars,
            id_base=args.id_base if args.id_base is not None else parser_cfg.id_base,
        ).validate()
    except ConfigError as e:
        print(f"[ERROR] {e}")
        return 1

    default_edges, default_mappings = default_output_paths(args.input)
    cfg = NormalizeConfig(verbose=not args.quiet, parser=parser_cfg)

    try:
        run_normalize(
            args.input,
            args.edges or default_edges,
            args.mappings or default_mappings,
            config=cfg,
        )
    except FileNotFoundError as e:
        print(f"[ERROR] {e}")
        return 1
    except MalformedLineError as e:
        print(f"[ERROR] {e}")
        return 2
    except (OSError, ValueError) as e:
        # undecodable or unreadable input
        print(f"[ERROR] {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
