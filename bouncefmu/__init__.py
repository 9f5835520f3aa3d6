"""One-dimensional bouncing ball model, FMI 2.0 interface vocabulary and an analytic reference solution."""

__version__ = "0.1.0"

__all__ = ["analytic", "bounce", "fmi2types", "functions", "masks", "model"]