"""
Services layer for workflows spanning several entities.
"""

from multiblog.services.simple_post_service import SimplePostService, simple_post_service

__all__ = [
    "SimplePostService",
    "simple_post_service",
]
