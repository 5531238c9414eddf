"""Paged main-memory model: configuration, process scripts, frames and page tables, physical access."""

__version__ = "0.1.0"
__all__ = ["access", "config", "paging", "pseudocode"]