#!/usr/bin/env python
"""
Setup script for the GradeRace summarizer.
Kept for older pip versions; the project metadata lives in pyproject.toml.
"""

from setuptools import setup

if __name__ == "__main__":
    setup()
