"""
Top-level package for the guided program matcher.

This package loads the static catalog of college business programs,
builds a small TF·IDF index over it, and ranks programs against a
free-text description of a person's interests by blending keyword
matches, cosine similarity and rule-based intent detection.  A FastAPI
app and a batch CLI sit on top.  There are no side-effects on import.
"""
from __future__ import annotations
