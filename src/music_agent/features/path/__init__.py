"""Summary: Public surface for deriving output directories and file paths.
Why: Keep suggestions and updated copies laid out by one shared rule.
"""

from .usecases.output_paths import allocate_output_path, derive_sibling_directory

__all__ = ["allocate_output_path", "derive_sibling_directory"]
