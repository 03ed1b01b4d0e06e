# figextract/core/__init__.py
