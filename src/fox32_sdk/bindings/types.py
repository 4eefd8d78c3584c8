"""
Binding Type System
===================

This module defines the C types that can appear in a jump-table binding,
and the variables (typed, named values) that occupy register slots.

Supported Types
---------------
| Constant | C spelling       | Width  |
|----------|------------------|--------|
| VOID     | void             | -      |
| BYTE     | unsigned char    | 8-bit  |
| IBYTE    | signed char      | 8-bit  |
| HALF     | unsigned short   | 16-bit |
| IHALF    | signed short     | 16-bit |
| WORD     | unsigned int     | 32-bit |
| IWORD    | signed int       | 32-bit |

Any type can be turned into a pointer with ``.ref``:

    >>> BYTE.ref
    CType('unsigned char*')
    >>> str(WORD.ref.ref)
    'unsigned int**'

Types carry nothing but their spelling. Two types are equal when they
are spelled the same way, and they render as that spelling.
"""

from dataclasses import dataclass


# =============================================================================
# Type Representation
# =============================================================================

@dataclass(frozen=True)
class CType:
    """
    A C type as spelled in generated code.

    Attributes:
        name: The C spelling of the type (e.g. "unsigned int", "char*")
    """
    name: str

    @property
    def ref(self) -> "CType":
        """Pointer to this type."""
        return CType(f"{self.name}*")

    @property
    def is_void(self) -> bool:
        """True for the bare void type (not void pointers)."""
        return self.name == "void"

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"CType({self.name!r})"


VOID = CType("void")
BYTE = CType("unsigned char")
IBYTE = CType("signed char")
HALF = CType("unsigned short")
IHALF = CType("signed short")
WORD = CType("unsigned int")
IWORD = CType("signed int")


# =============================================================================
# Variables
# =============================================================================

@dataclass(frozen=True)
class Variable:
    """
    A typed, named value passed into or out of a jump-table call.

    Attributes:
        type: The C type of the value
        name: The C identifier used in generated code
    """
    type: CType
    name: str

    def declaration(self) -> str:
        """Format as '<type> <name>' for parameter lists and locals."""
        return f"{self.type} {self.name}"

    def __str__(self) -> str:
        return self.declaration()
