"""Rendering of API data for the terminal."""
