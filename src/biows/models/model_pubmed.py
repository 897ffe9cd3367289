"""PubMed data models."""

from pydantic import BaseModel


class ArticleReference(BaseModel):
    """Title and DOI of one PubMed article."""

    title: str
    doi: str
