"""Developer command-line tools."""
