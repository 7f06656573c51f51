# This file makes the 'db' directory a Python package.
