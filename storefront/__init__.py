"""Storefront catalog and user API."""
