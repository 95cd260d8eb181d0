"""
Resume Keyword Analyzer

Compares the keywords of a resume with those of a job description and can
ask a language model for bullet points covering the missing ones.
"""

from .base import create_app

__version__ = "0.1.0"
__all__ = ["create_app"]
