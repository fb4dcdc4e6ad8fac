# pathreg/__init__.py
