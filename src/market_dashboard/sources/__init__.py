"""Upstream data sources: stock prices and earnings call transcripts."""
