"""Process table, ready and swap queues, and configuration parsing for a uniprocessor scheduling simulation."""

__version__ = "0.1.0"
__all__ = ["common", "config", "pct", "rdy", "swp"]