"""
fox32 Jump-Table Definitions
============================

This module holds the binding table for the fox32 ROM (fox32rom) and
operating system (fox32os) jump tables, and drives the emitter over it
to produce ``fox32.h``.

Calling Convention
------------------
Every ROM/OS routine is reached through a fixed jump-table address.
Arguments are passed in registers r0-r31 and results come back in the
same registers:

    parameter(0, str);      // stage argument into r0
    call(0xF0042004);       // jump through the table entry
    ret(1, result_1);       // read r1 back out

Jump-table ranges:
- 0xF0040000: fox32rom system
- 0xF0041000-0xF0049000: fox32rom drawing, overlay, menu bar, disk,
  memory, integer, audio and random services
- 0x00000810-0x00000E14: fox32os services

Table Entries
-------------
The table is an ordered tuple of three entry kinds:

- :class:`Heading` renders as a ``//`` comment
- :class:`Constant` renders as a ``#define``
- :class:`FunctionEntry` renders as a wrapper function

Order in the table is the order in the header. Many entries declare no
parameters or returns because their register usage has not been
described yet; they are kept exactly as declared and generate
``void name(void)`` wrappers.

Reference
---------
- fox32rom: https://github.com/fox32-arch/fox32rom
- fox32os: https://github.com/fox32-arch/fox32os
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from fox32_sdk.bindings.emitter import Document, format_hex
from fox32_sdk.bindings.signature import Signature
from fox32_sdk.bindings.types import BYTE, WORD, CType
from fox32_sdk.errors import DuplicateEntryError

logger = logging.getLogger(__name__)


# =============================================================================
# Table Entry Types
# =============================================================================

@dataclass(frozen=True)
class Param:
    """
    Declaration of one input parameter.

    Attributes:
        type: C type of the parameter
        name: C identifier of the parameter
        slot: Register slot, or None for the lowest free slot
    """
    type: CType
    name: str
    slot: Optional[int] = None


@dataclass(frozen=True)
class Result:
    """
    Declaration of one return value (named result_<slot>).

    Attributes:
        type: C type of the value
        slot: Register slot, or None for the lowest free slot
    """
    type: CType
    slot: Optional[int] = None


@dataclass(frozen=True)
class Heading:
    """A comment line grouping the entries that follow it."""
    text: str


@dataclass(frozen=True)
class Constant:
    """
    A named 32-bit value (event codes, key scancodes, widget types).

    Attributes:
        name: Macro name
        value: Unsigned 32-bit value
    """
    name: str
    value: int


@dataclass(frozen=True)
class FunctionEntry:
    """
    A jump-table routine.

    Parameters and returns are applied to a fresh Signature in the
    order given, so a slot declared twice keeps the later declaration
    and "next free slot" declarations see the slots taken before them.

    Attributes:
        address: Jump-table address
        name: Name of the generated C function
        params: Input declarations, in declaration order
        results: Return declarations, in declaration order
    """
    address: int
    name: str
    params: tuple[Param, ...] = field(default_factory=tuple)
    results: tuple[Result, ...] = field(default_factory=tuple)

    def build_signature(self) -> Signature:
        """Apply this entry's declarations to a new Signature."""
        signature = Signature(self.address, self.name)
        for param in self.params:
            signature.add_parameter(param.type, param.name, slot=param.slot)
        for result in self.results:
            signature.add_return(result.type, slot=result.slot)
        return signature


TableEntry = Union[Heading, Constant, FunctionEntry]


# =============================================================================
# Binding Table
# =============================================================================

_DRAW_TO_BACKGROUND_COLORS = (
    Param(WORD, "x"),
    Param(WORD, "y"),
    Param(WORD, "foreground_color"),
    Param(WORD, "background_color"),
)

BINDINGS_TABLE: tuple[TableEntry, ...] = (
    Heading("fox32rom definitions"),

    # =========================================================================
    # fox32rom System
    # =========================================================================

    Heading("system jump table"),

    FunctionEntry(0xF0040000, "get_rom_version"),
    FunctionEntry(0xF0040004, "system_vsync_handler"),
    FunctionEntry(0xF0040008, "get_mouse_position"),
    FunctionEntry(0xF004000C, "new_event"),
    FunctionEntry(0xF0040010, "wait_for_event"),
    FunctionEntry(0xF0040014, "get_next_event"),
    FunctionEntry(0xF0040018, "panic"),
    FunctionEntry(0xF004001C, "get_mouse_button"),
    FunctionEntry(0xF0040020, "scancode_to_ascii"),
    FunctionEntry(0xF0040024, "shift_pressed"),
    FunctionEntry(0xF0040028, "shift_released"),
    FunctionEntry(0xF004002C, "caps_pressed"),
    FunctionEntry(0xF0040030, "poweroff"),

    # =========================================================================
    # fox32rom Drawing
    # =========================================================================

    Heading("generic drawing jump table"),

    FunctionEntry(0xF0041000, "draw_str_generic"),
    FunctionEntry(0xF0041004, "draw_format_str_generic"),
    FunctionEntry(0xF0041008, "draw_decimal_generic"),
    FunctionEntry(0xF004100C, "draw_hex_generic"),
    FunctionEntry(0xF0041010, "draw_font_tile_generic"),
    FunctionEntry(0xF0041014, "draw_tile_generic"),
    FunctionEntry(0xF0041018, "set_tilemap"),
    FunctionEntry(0xF004101C, "draw_pixel_generic"),
    FunctionEntry(0xF0041020, "draw_filled_rectangle_generic"),
    FunctionEntry(0xF0041024, "get_tilemap"),

    Heading("background jump table"),

    FunctionEntry(
        0xF0042000, "fill_background",
        params=(Param(WORD, "color"),),
    ),
    FunctionEntry(
        0xF0042004, "draw_str_to_background",
        params=(Param(BYTE.ref, "str"),) + _DRAW_TO_BACKGROUND_COLORS,
        results=(Result(WORD, slot=1),),
    ),
    FunctionEntry(
        0xF0042008, "draw_format_str_to_background",
        params=(Param(BYTE.ref, "str"),) + _DRAW_TO_BACKGROUND_COLORS + tuple(
            Param(WORD, f"format_value_{i}", slot=10 + i) for i in range(6)
        ),
        results=(Result(WORD, slot=1),),
    ),
    FunctionEntry(
        0xF004200C, "draw_decimal_to_background",
        params=(Param(WORD, "value"),) + _DRAW_TO_BACKGROUND_COLORS,
        results=(Result(WORD, slot=1),),
    ),
    FunctionEntry(
        0xF0042010, "draw_hex_to_background",
        params=(Param(WORD, "value"),) + _DRAW_TO_BACKGROUND_COLORS,
        results=(Result(WORD, slot=1),),
    ),
    FunctionEntry(
        0xF0042014, "draw_font_tile_to_background",
        params=(Param(WORD, "tile"),) + _DRAW_TO_BACKGROUND_COLORS,
    ),
    FunctionEntry(
        0xF0042018, "draw_tile_to_background",
        params=(
            Param(WORD, "tile"),
            Param(WORD, "x"),
            Param(WORD, "y"),
        ),
    ),
    FunctionEntry(
        0xF004201C, "draw_pixel_to_background",
        params=(
            Param(WORD, "x"),
            Param(WORD, "y"),
            Param(WORD, "color"),
        ),
    ),
    FunctionEntry(
        0xF0042020, "draw_filled_rectangle_to_background",
        params=(
            Param(WORD, "x"),
            Param(WORD, "y"),
            Param(WORD, "width"),
            Param(WORD, "height"),
            Param(WORD, "color"),
        ),
    ),

    Heading("overlay jump table"),

    FunctionEntry(0xF0043000, "fill_overlay"),
    FunctionEntry(0xF0043004, "draw_str_to_overlay"),
    FunctionEntry(0xF0043008, "draw_format_str_to_overlay"),
    FunctionEntry(0xF004300C, "draw_decimal_to_overlay"),
    FunctionEntry(0xF0043010, "draw_hex_to_overlay"),
    FunctionEntry(0xF0043014, "draw_font_tile_to_overlay"),
    FunctionEntry(0xF0043018, "draw_tile_to_overlay"),
    FunctionEntry(0xF004301C, "draw_pixel_to_overlay"),
    FunctionEntry(0xF0043020, "draw_filled_rectangle_to_overlay"),
    FunctionEntry(0xF0043024, "check_if_overlay_covers_position"),
    FunctionEntry(0xF0043028, "check_if_enabled_overlay_covers_position"),
    FunctionEntry(0xF004302C, "enable_overlay"),
    FunctionEntry(0xF0043030, "disable_overlay"),
    FunctionEntry(0xF0043034, "move_overlay"),
    FunctionEntry(0xF0043038, "resize_overlay"),
    FunctionEntry(0xF004303C, "set_overlay_framebuffer_pointer"),
    FunctionEntry(0xF0043040, "get_unused_overlay"),
    FunctionEntry(0xF0043044, "make_coordinates_relative_to_overlay"),

    Heading("menu bar jump table"),

    FunctionEntry(0xF0044000, "enable_menu_bar"),
    FunctionEntry(0xF0044004, "disable_menu_bar"),
    FunctionEntry(0xF0044008, "menu_bar_click_event"),
    FunctionEntry(0xF004400C, "clear_menu_bar"),
    FunctionEntry(0xF0044010, "draw_menu_bar_root_items"),
    FunctionEntry(0xF0044014, "draw_menu_items"),
    FunctionEntry(0xF0044018, "close_menu"),
    FunctionEntry(0xF004401C, "menu_update_event"),

    # =========================================================================
    # fox32rom Disk, Memory and Misc Services
    # =========================================================================

    Heading("disk jump table"),

    FunctionEntry(0xF0045000, "read_sector"),
    FunctionEntry(0xF0045004, "write_sector"),
    FunctionEntry(0xF0045008, "ryfs_open"),
    FunctionEntry(0xF004500C, "ryfs_seek"),
    FunctionEntry(0xF0045010, "ryfs_read"),
    FunctionEntry(0xF0045014, "ryfs_read_whole_file"),
    FunctionEntry(0xF0045018, "ryfs_get_size"),
    FunctionEntry(0xF004501C, "ryfs_get_file_list"),
    FunctionEntry(0xF0045020, "ryfs_tell"),
    FunctionEntry(0xF0045024, "ryfs_write"),

    Heading("memory copy/compare jump table"),

    FunctionEntry(0xF0046000, "copy_memory_bytes"),
    FunctionEntry(0xF0046004, "copy_memory_words"),
    FunctionEntry(0xF0046008, "copy_string"),
    FunctionEntry(0xF004600C, "compare_memory_bytes"),
    FunctionEntry(0xF0046010, "compare_memory_words"),
    FunctionEntry(0xF0046014, "compare_string"),
    FunctionEntry(0xF0046018, "string_length"),

    Heading("integer jump table"),

    FunctionEntry(0xF0047000, "string_to_int"),

    Heading("audio jump table"),

    FunctionEntry(0xF0048000, "play_audio"),
    FunctionEntry(0xF0048004, "stop_audio"),

    Heading("random number jump table"),

    FunctionEntry(
        0xF0049000, "random",
        results=(Result(WORD),),
    ),
    FunctionEntry(
        0xF0049004, "random_range",
        params=(
            Param(WORD, "minimum", slot=1),
            Param(WORD, "maximum", slot=2),
        ),
        results=(Result(WORD),),
    ),

    Heading("keys"),

    Constant("KEY_CTRL", 0x1D),
    Constant("KEY_LSHIFT", 0x2A),
    Constant("KEY_RSHIFT", 0x36),
    Constant("KEY_CAPS", 0x3A),

    # =========================================================================
    # fox32os
    # =========================================================================

    Heading("fox32os definitions"),

    Heading("system jump table"),

    FunctionEntry(0x00000810, "get_os_version"),

    Heading("FXF jump table"),

    FunctionEntry(0x00000910, "parse_fxf_binary"),

    Heading("task jump table"),

    FunctionEntry(0x00000A10, "new_task"),
    FunctionEntry(0x00000A14, "yield_task"),
    FunctionEntry(0x00000A18, "end_current_task"),
    FunctionEntry(0x00000A1C, "get_current_task_id"),
    FunctionEntry(0x00000A20, "get_unused_task_id"),
    FunctionEntry(0x00000A24, "is_task_id_used"),

    Heading("memory jump table"),

    FunctionEntry(0x00000B10, "allocate_memory"),
    FunctionEntry(0x00000B14, "free_memory"),

    Heading("window jump table"),

    FunctionEntry(0x00000C10, "new_window"),
    FunctionEntry(0x00000C14, "destroy_window"),
    FunctionEntry(0x00000C18, "new_window_event"),
    FunctionEntry(0x00000C1C, "get_next_window_event"),
    FunctionEntry(0x00000C20, "draw_title_bar_to_window"),
    FunctionEntry(0x00000C24, "move_window"),
    FunctionEntry(0x00000C28, "fill_window"),
    FunctionEntry(0x00000C2C, "get_window_overlay_number"),
    FunctionEntry(0x00000C30, "start_dragging_window"),
    FunctionEntry(0x00000C34, "new_messagebox"),
    FunctionEntry(0x00000C38, "get_active_window_struct"),

    Heading("VFS jump table"),

    FunctionEntry(0x00000D10, "open"),
    FunctionEntry(0x00000D14, "seek"),
    FunctionEntry(0x00000D18, "tell"),
    FunctionEntry(0x00000D1C, "read"),
    FunctionEntry(0x00000D20, "write"),

    Heading("widget jump table"),

    FunctionEntry(0x00000E10, "draw_widgets_to_window"),
    FunctionEntry(0x00000E14, "handle_widget_click"),

    Heading("event types"),

    Constant("EVENT_TYPE_MOUSE_CLICK", 0x00000000),
    Constant("EVENT_TYPE_MOUSE_RELEASE", 0x00000001),
    Constant("EVENT_TYPE_KEY_DOWN", 0x00000002),
    Constant("EVENT_TYPE_KEY_UP", 0x00000003),
    Constant("EVENT_TYPE_MENU_BAR_CLICK", 0x00000004),
    Constant("EVENT_TYPE_MENU_UPDATE", 0x00000005),
    Constant("EVENT_TYPE_MENU_CLICK", 0x00000006),
    Constant("EVENT_TYPE_MENU_ACK", 0x00000007),
    Constant("EVENT_TYPE_BUTTON_CLICK", 0x80000000),
    Constant("EVENT_TYPE_EMPTY", 0xFFFFFFFF),

    Heading("widget types"),

    Constant("WIDGET_TYPE_BUTTON", 0x00000000),
)


# =============================================================================
# Lookup Functions
# =============================================================================

_FUNCTIONS_BY_NAME: dict[str, FunctionEntry] = {
    entry.name: entry for entry in BINDINGS_TABLE
    if isinstance(entry, FunctionEntry)
}

_FUNCTIONS_BY_ADDRESS: dict[int, FunctionEntry] = {
    entry.address: entry for entry in BINDINGS_TABLE
    if isinstance(entry, FunctionEntry)
}

_CONSTANTS_BY_NAME: dict[str, Constant] = {
    entry.name: entry for entry in BINDINGS_TABLE
    if isinstance(entry, Constant)
}


def get_function(name: str) -> Optional[FunctionEntry]:
    """
    Look up a jump-table function by name.

    Args:
        name: C function name (e.g., "random_range"), case-sensitive

    Returns:
        FunctionEntry if found, None otherwise
    """
    return _FUNCTIONS_BY_NAME.get(name)


def get_function_by_address(address: int) -> Optional[FunctionEntry]:
    """
    Look up a jump-table function by address.

    Example:
        >>> get_function_by_address(0xF0040018).name
        'panic'
    """
    return _FUNCTIONS_BY_ADDRESS.get(address)


def get_constant(name: str) -> Optional[Constant]:
    """Look up a constant by macro name."""
    return _CONSTANTS_BY_NAME.get(name)


def get_all_function_names() -> list[str]:
    """Get a sorted list of all function names in the table."""
    return sorted(_FUNCTIONS_BY_NAME.keys())


# =============================================================================
# Table Checking
# =============================================================================

def check_table(table: tuple[TableEntry, ...] = BINDINGS_TABLE) -> None:
    """
    Check that no name or address is declared twice.

    Generation does not run this check: a duplicate only shows up as a
    redefinition error when the header is compiled. Running it first
    reports the clash against the table instead.

    Args:
        table: Entries to check

    Raises:
        DuplicateEntryError: On the first repeated function name,
            function address or constant name
    """
    names: dict[str, int] = {}
    addresses: dict[int, str] = {}
    constants: dict[str, int] = {}

    for entry in table:
        if isinstance(entry, FunctionEntry):
            if entry.name in names:
                raise DuplicateEntryError(
                    "function name", entry.name,
                    format_hex(names[entry.name]), format_hex(entry.address),
                )
            if entry.address in addresses:
                raise DuplicateEntryError(
                    "address", format_hex(entry.address),
                    addresses[entry.address], entry.name,
                )
            names[entry.name] = entry.address
            addresses[entry.address] = entry.name
        elif isinstance(entry, Constant):
            if entry.name in constants:
                raise DuplicateEntryError(
                    "constant", entry.name,
                    format_hex(constants[entry.name]), format_hex(entry.value),
                )
            constants[entry.name] = entry.value

    logger.debug(
        f"Table check passed: {len(names)} functions, {len(constants)} constants"
    )


# =============================================================================
# Header Generation
# =============================================================================

def build_document(table: tuple[TableEntry, ...] = BINDINGS_TABLE) -> Document:
    """
    Render every table entry into a new Document, in table order.

    Args:
        table: Entries to render

    Returns:
        The populated Document
    """
    document = Document()

    for entry in table:
        if isinstance(entry, Heading):
            document.add_comment(entry.text)
        elif isinstance(entry, Constant):
            document.add_constant(entry.name, entry.value)
        elif isinstance(entry, FunctionEntry):
            document.add_function(entry.build_signature())
        else:
            raise TypeError(f"unknown table entry {entry!r}")

    logger.debug(
        f"Generated {document.function_count} functions and "
        f"{document.constant_count} constants"
    )
    return document


def generate_bindings_header(table: tuple[TableEntry, ...] = BINDINGS_TABLE) -> str:
    """
    Generate the complete C header for a binding table.

    Args:
        table: Entries to render (default: the fox32 table)

    Returns:
        Header text, identical on every call for the same table

    Example:
        >>> header = generate_bindings_header()
        >>> header.splitlines()[0]
        '#pragma once'
    """
    return build_document(table).render()
