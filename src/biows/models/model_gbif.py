"""Pydantic models for GBIF backbone taxonomy data."""

from enum import Enum

from pydantic import BaseModel, model_validator

from biows.constants import TAXONOMIC_STATUS_MAP


class TaxonomicStatus(str, Enum):
    """Normalised GBIF ``taxonomicStatus``."""

    ACCEPTED = "accepted"
    DOUBTFUL = "doubtful"
    SYNONYM = "synonym"
    HETEROTYPIC_SYNONYM = "heterotypic synonym"
    HOMOTYPIC_SYNONYM = "homotypic synonym"
    PROPARTE_SYNONYM = "proparte synonym"
    MISAPPLIED = "misapplied"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_token(cls, token: str) -> "TaxonomicStatus":
        """Map a raw token such as ``HOMOTYPIC_SYNONYM`` to a status.

        The token is lowercased and underscores become spaces before lookup;
        anything not in TAXONOMIC_STATUS_MAP is UNRECOGNIZED.
        """
        normalised = token.replace("_", " ").lower().strip()
        mapped = TAXONOMIC_STATUS_MAP.get(normalised)
        return cls(mapped) if mapped else cls.UNRECOGNIZED


class TaxonRecord(BaseModel):
    """First match of a GBIF species name search.

    An all-default instance means "not found".
    """

    key: int = 0
    scientific_name: str = ""
    authorship: str = ""
    status: TaxonomicStatus | None = None
    valid_name: str = ""  # only set when status is not ACCEPTED
    kingdom: str = ""
    phylum: str = ""
    class_rank: str = ""
    order: str = ""
    family: str = ""

    @model_validator(mode="before")
    @classmethod
    def coerce_nones(cls, values: dict) -> dict:
        for field_name, field_info in cls.model_fields.items():
            if values.get(field_name) is None and field_info.default is not None:
                values[field_name] = field_info.default
        return values

    @property
    def is_accepted(self) -> bool:
        return self.status is TaxonomicStatus.ACCEPTED
