"""Colours, fonts and stylesheets."""
