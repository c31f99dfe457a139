"""
Schema loading from descriptor files.
"""

from dpjoins.input.descriptor_converter import DescriptorConverter
from dpjoins.input.descriptor_reader import DescriptorReader
from dpjoins.shared.types import FilePath
from dpjoins.typing.schema import Schema


def load_schema(file_path: FilePath) -> Schema:
    """
    Read a data package descriptor file and convert it to a Schema.

    Raises:
        DescriptorError: If the file cannot be read or converted
    """
    descriptor = DescriptorReader().read(file_path)
    return DescriptorConverter().convert(descriptor)
