"""
Catalog record types and document schemas.

Catalog records stay plain dicts: outfits carry arbitrary categorical
fields, and brands carry passthrough fields that must survive filtering.
The pydantic documents below only check the top-level shape of the two
JSON files before they are handed to the catalog.
"""

from typing import Any, Collection, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Record Types
# ============================================================================

# {"id": ..., <field>: <value>, ...}
Outfit = Dict[str, Any]

# {"name": str, "outfits": [Outfit, ...], ...passthrough}
Brand = Dict[str, Any]

# {"key": str, "options": [{"value": ...}, ...]}
Trait = Dict[str, Any]

# {"comic_id": ..., ...}
Template = Dict[str, Any]

# brand name -> field name -> values to match
FilterConfig = Mapping[str, Mapping[str, Collection[Any]]]


# ============================================================================
# Document Schemas
# ============================================================================

class AssetsDocument(BaseModel):
    """Top-level shape of assets.json."""
    model_config = ConfigDict(extra="allow")

    # gender -> style -> {"categories": [Trait, ...]}
    traits: Dict[str, Dict[str, Dict[str, Any]]] = Field(..., description="Trait categories per gender and style")
    # gender -> {"brands": [Brand, ...]}
    outfits: Dict[str, Dict[str, Any]] = Field(..., description="Outfit brands per gender")


class TemplatesDocument(BaseModel):
    """Top-level shape of templates.json."""
    model_config = ConfigDict(extra="allow")

    imoji: List[Dict[str, Any]] = Field(default_factory=list, description="Single-avatar comic templates")
    friends: List[Dict[str, Any]] = Field(default_factory=list, description="Two-avatar (friendmoji) templates")
