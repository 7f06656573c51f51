# This file makes the 'synthesis' directory a Python package.
