"""
Utility helpers.

Small path helpers shared by the pipeline and the command-line scripts.
"""

from gnormalizer.utils.paths import default_output_paths, ensure_parent_dir

__all__ = [
    "default_output_paths",
    "ensure_parent_dir",
]
