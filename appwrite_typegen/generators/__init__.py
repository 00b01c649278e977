"""
TypeScript declaration generators.

Each generator turns part of the validated schema into one section of the
generated file: enums and union types, interfaces, and ID constants.
"""

from .enums import EnumGenerator, EnumDefinitions, EnumMember
from .interfaces import InterfaceGenerator, InterfaceField
from .id_constants import IdConstantsGenerator, ConstantEntry, ConstantTables


__all__ = [
    'EnumGenerator',
    'EnumDefinitions',
    'EnumMember',
    'InterfaceGenerator',
    'InterfaceField',
    'IdConstantsGenerator',
    'ConstantEntry',
    'ConstantTables',
]
