"""Eligibility and match scoring for student job and course postings."""

__version__ = "1.0.0"
