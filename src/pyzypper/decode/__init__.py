"""Decoders for zypper's XML output."""

from pyzypper.decode.search import decode_search_results

__all__ = ["decode_search_results"]
