from .depth import average_depth, summarize_depths

__all__ = ["average_depth", "summarize_depths"]
