import os


def ensure_parent_dir(path):
    """
    Ensure the directory that will contain `path` exists.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def default_output_paths(input_path):
    """
    Derive default edge and mapping output paths from an input file.

    graph.txt -> graph_edges.txt, graph_mappings.csv (same directory)
    """
    stem, _ = os.path.splitext(input_path)
    return f"{stem}_edges.txt", f"{stem}_mappings.csv"
