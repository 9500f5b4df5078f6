"""Step-by-step test bench for binary adder circuits on a simulated pin board."""

__version__ = "0.1.0"
__all__ = ["circuits", "bench"]