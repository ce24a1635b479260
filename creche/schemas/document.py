# creche/schemas/document.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import Field

from .common import CamelModel


class ApplicationOwner(CamelModel):
    kind: Literal["application"]
    id: int


class ChildOwner(CamelModel):
    kind: Literal["child"]
    id: int


DocumentOwner = Annotated[Union[ApplicationOwner, ChildOwner], Field(discriminator="kind")]


class DocumentIn(CamelModel):
    owner: DocumentOwner
    type: str = Field(min_length=2)
    file_name: str = Field(min_length=2)
    file_url: str = Field(min_length=2)


class DocumentOut(CamelModel):
    id: int
    owner: DocumentOwner
    type: str
    file_name: str
    file_url: str
    upload_date: datetime
