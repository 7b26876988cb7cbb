from .index_maintainer import IndexMaintainer

__all__ = ["IndexMaintainer"]
