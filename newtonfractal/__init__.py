"""Newton-Raphson fractal for z**3 - 1, computed sequentially or by local worker processes."""

__version__ = "1.0.0"