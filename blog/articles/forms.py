"""
Article Form

Holds submitted values so a rejected form can be shown again exactly as
typed.
"""

from dataclasses import dataclass

from blog.models import Article

FIELDS = ('title', 'preview', 'body', 'slug', 'category')


@dataclass
class ArticleForm:
    title: str = ''
    preview: str = ''
    body: str = ''
    slug: str = ''
    category: str = ''

    @classmethod
    def from_request(cls, form):
        return cls(**{name: form.get(name, '') for name in FIELDS})

    @classmethod
    def from_article(cls, article):
        return cls(**{name: getattr(article, name) or '' for name in FIELDS})

    def to_article(self, published=None, edited=None):
        """Unsaved Article carrying the submitted fields."""
        return Article(
            title=self.title,
            preview=self.preview,
            body=self.body,
            slug=self.slug,
            category=self.category,
            published=published,
            edited=edited,
        )
