from .io import ensure_dir, read_file, write_file

__all__ = ["ensure_dir", "read_file", "write_file"]
