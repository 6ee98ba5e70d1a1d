"""Catalog service client and payload mapping."""

from .client import CatalogServiceAdapter
from .parsers import parse_show, parse_torrents

__all__ = ["CatalogServiceAdapter", "parse_show", "parse_torrents"]
