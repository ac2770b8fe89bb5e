"""quickscii ASCII — charset registry, glyph mapping, bitmap rendering."""
