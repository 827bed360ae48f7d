from . import agent, analyze, health

__all__ = ["agent", "analyze", "health"]
