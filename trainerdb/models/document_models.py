"""
Document models for the trainer repository.

This module contains the entities stored in MongoDB and their mapping
to and from raw collection documents.
"""

from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field


class DocumentModel(BaseModel):
    """Base entity stored as one document; `id` mirrors the store-assigned `_id`."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Build the document to write. The identifier is never written."""
        return self.model_dump(exclude={"id"})

    @classmethod
    def from_document(cls, document: Mapping[str, Any]):
        """Decode a stored document, exposing `_id` as a string `id`."""
        data = dict(document)
        object_id = data.pop("_id", None)
        if object_id is not None:
            data["id"] = str(object_id)
        return cls.model_validate(data)


class Trainer(DocumentModel):
    """Trainer entity: a named person with an age and a home city."""

    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    city: str

    def __repr__(self):
        return f"<Trainer(id={self.id!r}, name={self.name!r}, age={self.age}, city={self.city!r})>"
