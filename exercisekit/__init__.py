"""Classic programming exercises: expressions, a calculator, recursion, arrays and a greeting."""

__version__ = "0.1.0"
__all__ = ["arrays", "calculator", "expressions", "greeting", "recursion"]