"""Query infostealer infection logs from the infections search service."""
