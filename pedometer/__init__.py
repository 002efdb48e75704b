"""Step-counter building blocks: filtering, step detection, inputs, LEDs, scheduling and display."""

__version__ = "0.1.0"