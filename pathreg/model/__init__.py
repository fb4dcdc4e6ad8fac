# pathreg/model/__init__.py
