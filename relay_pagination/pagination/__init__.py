"""Pagination engine: cursor codecs, ordering, validation and connection assembly."""
