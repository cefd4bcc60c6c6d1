"""Storefront client core: cart, checkout, data access and localization."""
