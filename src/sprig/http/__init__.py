"""Query-string parsing for locations read back by the extractor."""
