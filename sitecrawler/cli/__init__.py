"""
Command-line interface for the site crawler
"""

from sitecrawler.cli.app import app

__all__ = ["app"]
