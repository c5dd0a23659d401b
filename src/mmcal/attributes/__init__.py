"""Per-day attributes: astrological categories and the name-keyed attribute registry."""

# Register the standard attributes on import
from . import standard as _standard  # noqa: F401
