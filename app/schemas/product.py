"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for product operations.

Field presence:
--------------
``ProductFields`` tells "absent" apart from "present but null/falsy" through
pydantic's ``model_fields_set``:

    {"name": "Desk"}                 -> supplied = {"name"}
    {"name": "Desk", "price": null}  -> supplied = {"name", "price"}

Create/replace check presence only; partial updates additionally skip
falsy values.

==============================================================================
"""

from typing import Any, Dict, List, Optional, Set
from pydantic import BaseModel, ConfigDict, Field

from app.catalog.models import REQUIRED_PRODUCT_FIELDS, Price


class ProductFields(BaseModel):
    """Product payload for create, replace and partial update."""

    model_config = ConfigDict(extra="allow")

    category: Optional[str] = Field(default=None)
    name: Optional[str] = Field(default=None)
    price: Optional[Price] = Field(default=None)

    @property
    def supplied(self) -> Set[str]:
        """Names of the fields present in the payload."""
        return set(self.model_fields_set) | set(self.model_extra or {})

    def missing_required(self) -> List[str]:
        """Required fields absent from the payload, in declaration order."""
        supplied = self.supplied
        return [field for field in REQUIRED_PRODUCT_FIELDS if field not in supplied]

    def supplied_values(self) -> Dict[str, Any]:
        """Supplied fields and their values, ``id`` excluded."""
        values = {
            field: getattr(self, field)
            for field in type(self).model_fields
            if field in self.model_fields_set
        }
        values.update(self.model_extra or {})
        values.pop("id", None)
        return values

    def truthy_updates(self) -> Dict[str, Any]:
        """Required-set fields that were supplied with a truthy value."""
        supplied = self.supplied
        return {
            field: getattr(self, field)
            for field in REQUIRED_PRODUCT_FIELDS
            if field in supplied and getattr(self, field)
        }


class ProductCreatedResponse(BaseModel):
    """Identifier of a newly created product."""
    id: str
