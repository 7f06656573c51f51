# This file makes the 'cache' directory a Python package.
