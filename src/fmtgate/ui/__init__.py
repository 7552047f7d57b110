"""User-facing front-ends for fmtgate."""
