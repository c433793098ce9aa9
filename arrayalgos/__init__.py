"""Classic array, search, counting, sum and matrix algorithms on plain Python lists."""

__version__ = "0.1.0"
__all__ = ["rearrange", "search", "matrix", "sums", "counting", "merge"]