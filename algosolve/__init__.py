"""Classic algorithms on arrays, strings, matrices and linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "greedy", "linked_list", "maths", "matrix", "searching", "strings", "sums"]