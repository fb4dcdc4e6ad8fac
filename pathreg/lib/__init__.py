# pathreg/lib/__init__.py
