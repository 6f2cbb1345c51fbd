"""
Models Package

Exports all models for easy importing.
"""

from blog.models.article import Article, CATEGORIES, PROGRAMMING, OTHER
from blog.models.user import User

__all__ = ['Article', 'User', 'CATEGORIES', 'PROGRAMMING', 'OTHER']
