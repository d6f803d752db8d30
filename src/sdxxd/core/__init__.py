# Core module for sdxxd

from sdxxd.core.decoder import PatchDecoder
from sdxxd.core.encoder import chunk_size, encode
from sdxxd.core.models import RawFlags, ResolvedParams, SetFlags
from sdxxd.core.numbers import parse_number
from sdxxd.core.resolver import resolve_params

__all__ = [
    "PatchDecoder",
    "RawFlags",
    "ResolvedParams",
    "SetFlags",
    "chunk_size",
    "encode",
    "parse_number",
    "resolve_params",
]
