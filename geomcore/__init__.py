"""
geomcore - vector algebra and geometric predicates for 2D and 3D space
"""
import logging

__version__ = "0.1.0"

# Applications configure handlers; the library only emits records
logging.getLogger(__name__).addHandler(logging.NullHandler())
