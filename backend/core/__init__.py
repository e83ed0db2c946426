"""Parsing core: vocabulary, grammar, summarization, catalog resolution, reports."""
