# This file makes the 'rendering' directory a Python package.
