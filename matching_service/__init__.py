"""Django project package for the blood matching service."""
