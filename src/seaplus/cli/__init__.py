"""
SeaPlus Command-Line Interface
==============================

This package provides command-line tools for SeaPlus:

- **sptok**: tokenizer listing and lexical error checker

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["sptok"]
