from tinylisp.reader.parser import Reader, parse
from tinylisp.reader.printer import render

__all__ = ["Reader", "parse", "render"]
