"""
Input layer for data package descriptors.
"""

from .descriptor_converter import DescriptorConverter
from .descriptor_reader import DescriptorReader
from .schema_loader import load_schema

__all__ = [
    "DescriptorReader",
    "DescriptorConverter",
    "load_schema",
]
