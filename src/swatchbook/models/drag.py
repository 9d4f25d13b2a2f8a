"""Drag gesture tokens.

A drag source or destination is one of:

- ``StagingToken``: the staging slot holding the not-yet-saved color
- ``EndOfListToken``: the empty area after the last palette entry
- ``EntryToken``: a palette entry, by key

Tokens are discriminated on ``kind`` so they can be parsed from gesture
payloads with ``DragTokenAdapter.validate_python(...)``.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class StagingToken(BaseModel):
    """The staging slot."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["staging"] = "staging"


class EndOfListToken(BaseModel):
    """The slot after the last entry."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["end_of_list"] = "end_of_list"


class EntryToken(BaseModel):
    """An existing palette entry."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["entry"] = "entry"
    key: str = Field(description="Key of the palette entry")


DragToken = Annotated[StagingToken | EndOfListToken | EntryToken, Field(discriminator="kind")]

DragTokenAdapter: TypeAdapter[DragToken] = TypeAdapter(DragToken)
