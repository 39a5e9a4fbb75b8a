"""designdemos — dispatch and compositional-gauge design demonstrations."""

__version__ = "0.1.0"
