"""srcbundle: concatenate source files into a single bundle."""

__version__ = "1.0.0"
