"""Headless presentation shell for Inspira.

Binds the quote sync controller to an application state object that a
front end renders. Nothing here needs a display server, so the package can be
imported in headless test runs.
"""
