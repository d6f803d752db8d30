"""Core data models for sdxxd.

This module defines the Pydantic models that carry flag values from the
command line to the dump and revert drivers.
"""

from pydantic import BaseModel, ConfigDict, Field


class RawFlags(BaseModel):
    """Flag values exactly as typed on the command line.

    Numeric flags stay strings here; the resolver decides how each
    literal is interpreted.
    """

    model_config = ConfigDict(frozen=True)

    little_endian: bool = Field(default=False, description="Byte-reverse each hex group")
    group_size: str = Field(default="2", description="Octets per hex group")
    length: str = Field(default="-1", description="Stop after this many octets")
    columns: str = Field(default="16", description="Octets per output line")
    seek: str = Field(default="0", description="Start at this byte offset")
    revert: bool = Field(default=False, description="Convert a dump back to binary")


class SetFlags(BaseModel):
    """Which numeric flags were supplied explicitly."""

    model_config = ConfigDict(frozen=True)

    group_size: bool = False
    length: bool = False
    columns: bool = False
    seek: bool = False


class ResolvedParams(BaseModel):
    """Validated parameters driving one dump.

    Snapshots are immutable; drivers that need a different length build
    a new one with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    columns: int = Field(default=16, description="Bytes per output line")
    group_size: int = Field(default=2, description="Bytes per hex group")
    length: int = Field(default=0, description="Total bytes to render")
    seek: int = Field(default=0, description="Starting byte offset")
    is_file: bool = Field(default=False, description="Source has a known size")
    little_endian: bool = Field(default=False, description="Byte-reverse each hex group")
    revert: bool = Field(default=False, description="Decode a dump instead of encoding")
