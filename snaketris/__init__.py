"""Snake game in which three body rings of one colour collapse into two."""

__version__ = "0.1.0"