"""
fox32 SDK Error Hierarchy
=========================

This module defines the exception hierarchy for the fox32 SDK.
All exceptions inherit from Fox32Error, allowing callers to catch all
SDK-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
Fox32Error (base)
├── BindingError (jump-table binding generation)
│   ├── SlotIndexError - register slot outside 0-31
│   ├── SlotCapacityError - all 32 register slots already occupied
│   └── DuplicateEntryError - name or address declared twice in a table
└── GraphicsError (tile data conversion)
    └── TileSizeError - image dimensions not a multiple of the tile size

All of these are authoring-time failures: the binding table is static and
the tile converter works on files chosen by the developer. None of them
are meant to be recovered from inside the SDK; the CLI layer turns them
into an error message and exit code.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class Fox32Error(Exception):
    """
    Base exception for all fox32 SDK errors.

    All exceptions in the SDK inherit from this class, allowing callers
    to catch all SDK-related errors with a single except clause:

        try:
            header = generate_bindings_header()
        except Fox32Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Binding Generation Exceptions
# =============================================================================

class BindingError(Fox32Error):
    """
    Base exception for errors while building or rendering bindings.

    Attributes:
        message: The error description
        function: Name of the jump-table function involved (optional)
    """

    def __init__(self, message: str, function: Optional[str] = None):
        self.message = message
        self.function = function
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Prefix the message with the function name when known."""
        if self.function:
            return f"{self.function}: {self.message}"
        return self.message


class SlotIndexError(BindingError):
    """
    Register slot index outside the valid range.

    The fox32 calling convention passes values in registers r0-r31, so
    a slot index must be in the range 0-31.
    """

    def __init__(self, slot: int, function: Optional[str] = None):
        self.slot = slot
        super().__init__(f"slot {slot} is outside the range 0-31", function)


class SlotCapacityError(BindingError):
    """
    No free register slot left.

    Raised when a parameter or return value is declared "by next free
    slot" on a signature whose 32 slots are already occupied.
    """

    def __init__(self, kind: str, function: Optional[str] = None):
        self.kind = kind
        super().__init__(f"all 32 {kind} slots are occupied", function)


class DuplicateEntryError(BindingError):
    """
    Name or address declared more than once in a binding table.

    Only raised by the optional table consistency check; plain generation
    emits duplicates as-is and leaves the C compiler to reject them.
    """

    def __init__(self, what: str, value: str, first: str, second: str):
        self.what = what
        self.value = value
        super().__init__(
            f"duplicate {what} {value} (first {first}, again {second})"
        )


# =============================================================================
# Graphics Conversion Exceptions
# =============================================================================

class GraphicsError(Fox32Error):
    """Base exception for image to tile data conversion errors."""
    pass


class TileSizeError(GraphicsError):
    """
    Image dimensions are not a whole number of tiles.

    Both the width and the height of the input image must be exact
    multiples of the requested tile width and height.
    """

    def __init__(self, image_size: tuple[int, int], tile_size: tuple[int, int]):
        self.image_size = image_size
        self.tile_size = tile_size
        super().__init__(
            f"image size {image_size[0]}x{image_size[1]} is not a multiple "
            f"of the tile size {tile_size[0]}x{tile_size[1]}"
        )
