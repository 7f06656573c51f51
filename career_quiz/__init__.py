# This file makes the 'career_quiz' directory a Python package.
__version__ = "1.0.0"
