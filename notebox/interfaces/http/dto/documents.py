from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from notebox.domain.documents.entities import Document


class CreateDocumentRequestDTO(BaseModel):
    title: str = Field(min_length=1)
    content: str


class DocumentDTO(BaseModel):
    id: str = Field(serialization_alias="_id")
    title: str
    content: str
    owner: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_entity(cls, document: Document) -> DocumentDTO:
        return cls(
            id=document.id,
            title=document.title,
            content=document.content,
            owner=document.owner_id,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )
