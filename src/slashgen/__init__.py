"""slashgen: compile prompt catalogues into slash-command manifests."""

__version__ = "0.1.0"
