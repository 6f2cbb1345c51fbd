"""
Store Exceptions
"""


class StoreError(Exception):
    """A write to the article store failed and was rolled back."""


class SlugInUseError(StoreError):
    """Another article already owns this slug (compared case-insensitively)."""

    def __init__(self, slug):
        super().__init__(f'slug already in use: {slug}')
        self.slug = slug
