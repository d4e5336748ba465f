"""Summary: ID3 tag reader and copy-then-retag writer backed by mutagen.
Why: Isolate the tag codec from the suggestion pipeline.
"""

from .reader import read_metadata
from .writer import TagEditor, write_metadata_safely

__all__ = ["TagEditor", "read_metadata", "write_metadata_safely"]
