"""Post-parse fixers and the pipeline running them."""

from feedio.fixers.last_modified import LastModifiedFixer
from feedio.fixers.pipeline import FixerPipeline
from feedio.fixers.protocols import Fixer, FixerBase
from feedio.fixers.public_id import PublicIdFixer

__all__ = [
    "Fixer",
    "FixerBase",
    "FixerPipeline",
    "LastModifiedFixer",
    "PublicIdFixer",
]
