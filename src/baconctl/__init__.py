"""baconctl — degrees-of-separation explorer for actor co-star graphs."""

__version__ = "0.1.0"
