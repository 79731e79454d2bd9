"""Adaptateurs de parsing."""

from aircat.adapters.parsing.locator_parser import LocatorParser, parse_url

__all__ = ["LocatorParser", "parse_url"]
