"""sdxxd - hexadecimal dump and revert tool.

sdxxd renders binary input as an xxd-style hex dump (offset, grouped hex
bytes, printable-ASCII column) and can rebuild the original bytes from
such a dump. Input comes from a file of known size or from standard input.
"""

__version__ = "1.0.0"
