"""
IRIS News – fetches the IRIS news listing page, discovers article links
and extracts a short readable excerpt from each article.
"""

__version__ = "0.1.0"

# Expose submodules
from . import ingestion
