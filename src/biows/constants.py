"""Project-wide constants."""

# -- Base client defaults ---------------------------------------------------
DEFAULT_TIMEOUT: float = 30.0
DEFAULT_USER_AGENT: str = "biows/2.0 (python; aiohttp)"
DEFAULT_LIMIT: int = 10

# -- GBIF -------------------------------------------------------------------
GBIF_BASE_URL: str = "http://api.gbif.org/v1"

# -- NCBI Entrez ------------------------------------------------------------
NCBI_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/"

# -- Wikipedia --------------------------------------------------------------
WIKIPEDIA_SUMMARY_URL: str = "https://en.wikipedia.org/api/rest_v1/page/summary/"
WIKIPEDIA_MEDIA_URL: str = "https://en.wikipedia.org/api/rest_v1/page/media-list/"
WIKIPEDIA_REDIRECT_URL: str = "https://en.wikipedia.org/w/api.php?action=query&titles="
WIKIPEDIA_IMAGE_EXTENSION: str = ".jpg"

# -- FiveFilters ------------------------------------------------------------
FIVEFILTERS_BASE_URL: str = "http://termextract.fivefilters.org/"

# -- PubMed -----------------------------------------------------------------
PUBMED_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/"

# -- GBIF taxonomicStatus token → normalised status -------------------------
TAXONOMIC_STATUS_MAP: dict[str, str] = {
    "accepted": "accepted",
    "doubtful": "doubtful",
    "synonym": "synonym",
    "heterotypic synonym": "heterotypic synonym",
    "homotypic synonym": "homotypic synonym",
    "proparte synonym": "proparte synonym",
    "pro parte synonym": "proparte synonym",
    "misapplied": "misapplied",
}
