"""Developer command wrappers (lint, format, test)."""
