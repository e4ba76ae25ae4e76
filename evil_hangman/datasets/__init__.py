from .validator import validate_dictionary, pretty_summary
from .io import DEFAULT_DICTIONARY, load_dictionary, read_lines, write_lines

__all__ = ["validate_dictionary", "pretty_summary", "load_dictionary", "read_lines", "write_lines",
           "DEFAULT_DICTIONARY"]
