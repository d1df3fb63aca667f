"""Catalog and contact-form backend for the pilgrimage tours site."""
