"""
CLI module for reservation extraction.

Provides command-line tools for extracting fields from saved client messages.
"""

from reservation_extractor.cli.extract import main as extract_main

__all__ = ["extract_main"]
