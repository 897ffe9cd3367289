"""BioWS: unified clients for public biodiversity and bibliographic web services."""

__version__ = "2.0.0"
