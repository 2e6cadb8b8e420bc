# -*- coding: utf-8 -*-

"""Audit and normalize the top-level keys of JSON locale files."""

__version__ = "0.1.0"
