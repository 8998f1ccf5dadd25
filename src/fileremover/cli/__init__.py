"""Command line interface for FileRemover."""
