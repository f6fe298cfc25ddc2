"""Icon-font code points, an icon factory, a key/value table and an XML tree model for viewing REST responses."""

__version__ = "0.1.0"