"""
Services Package

Exports all services for easy importing.
"""

from blog.services.pagination import PAGE_SIZE, PageInfo, make_page_info, paginate, parse_page_number
from blog.services.security import hash_password, verify_password
from blog.services.validation import validate_article, validate_login
from blog.services.demo import make_demo_articles
from blog.services.notify import LoginNotifier, client_ip

__all__ = [
    'PAGE_SIZE',
    'PageInfo',
    'make_page_info',
    'paginate',
    'parse_page_number',
    'hash_password',
    'verify_password',
    'validate_article',
    'validate_login',
    'make_demo_articles',
    'LoginNotifier',
    'client_ip',
]
