# This file makes the 'routers' directory a Python package.
