"""Stylesheets and other resources."""
