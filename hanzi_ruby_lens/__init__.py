"""Persistence core for the Hanzi Ruby Lens reader.

Stores the single "current document" (raw input plus its segmentation into
plain text and annotated words) in a local SQLite file and reloads it verbatim.
"""
