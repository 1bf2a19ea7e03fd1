"""Backends for RPSL output generation (plain text, etc.)."""

from .text_generator import TextMode, generate_text, save_text_file

__all__ = ["TextMode", "generate_text", "save_text_file"]
