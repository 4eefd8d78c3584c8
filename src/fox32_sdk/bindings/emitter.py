"""
C Binding Emitter
=================

This module turns jump-table Signatures into C source text. Each
signature becomes a ``static inline`` wrapper that stages its arguments
into registers, calls the jump-table address, and copies results back:

    static inline unsigned int random_range(
        unsigned int minimum,
        unsigned int maximum
    ) {
        unsigned int result_0;
        parameter(1, minimum);
        parameter(2, maximum);
        call(0xF0049004);
        ret(0, result_0);
        return result_0;
    }

The ``parameter``, ``call`` and ``ret`` macros come from ``call.h``,
which :func:`generate_call_header` produces.

Output Layout
-------------
A header is a :class:`Document`: the fixed preamble followed by rendered
comments, constants and functions in the order they were added, each
followed by one blank line. Rendering involves no sorting, timestamps or
other state, so the same input always produces byte-identical output.
"""

import logging

from fox32_sdk.bindings.signature import Signature
from fox32_sdk.bindings.types import VOID

logger = logging.getLogger(__name__)


# Name of the primitives header every generated header includes
CALL_HEADER_NAME = "call.h"

PREAMBLE = f'#pragma once\n\n#include "{CALL_HEADER_NAME}"\n\n'

INDENT = "    "


# =============================================================================
# Entity Rendering
# =============================================================================

def format_hex(value: int) -> str:
    """
    Format a 32-bit value as a C hex literal with 8 upper-case digits.

    Args:
        value: Unsigned 32-bit value

    Returns:
        Literal like "0x0000001D"

    Raises:
        ValueError: If value does not fit in 32 unsigned bits
    """
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"value {value} does not fit in 32 unsigned bits")
    return f"0x{value:08X}"


def render_function(signature: Signature) -> str:
    """
    Render a signature as a static inline C wrapper.

    The wrapper returns the lowest populated return slot; any other
    return slots are still read into locals but are not visible to the
    caller.

    Args:
        signature: The jump-table entry to render

    Returns:
        Function definition ending in "}\\n"
    """
    inputs = signature.inputs
    outputs = signature.outputs
    result = signature.result

    head = f"static inline {signature.return_type} {signature.name}("
    if inputs:
        params = ",\n".join(INDENT + reg.variable.declaration() for reg in inputs)
        lines = [head, params, ") {"]
    else:
        lines = [f"{head}{VOID}) {{"]

    for reg in outputs:
        lines.append(f"{INDENT}{reg.variable.declaration()};")

    for reg in inputs:
        lines.append(f"{INDENT}parameter({reg.index}, {reg.variable.name});")

    lines.append(f"{INDENT}call({format_hex(signature.address)});")

    for reg in outputs:
        lines.append(f"{INDENT}ret({reg.index}, {reg.variable.name});")

    if result is not None:
        lines.append(f"{INDENT}return {result.variable.name};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def render_constant(name: str, value: int) -> str:
    """Render a #define followed by a blank line."""
    return f"#define {name} {format_hex(value)}\n\n"


def render_comment(text: str) -> str:
    """Render a // comment line followed by a blank line."""
    return f"// {text}\n\n"


# =============================================================================
# Document Buffer
# =============================================================================

class Document:
    """
    Append-only buffer holding one generated header.

    Example:
        >>> doc = Document()
        >>> doc.add_comment("keys")
        >>> doc.add_constant("KEY_CTRL", 0x1D)
        >>> print(doc.render())
        #pragma once
        <BLANKLINE>
        #include "call.h"
        <BLANKLINE>
        // keys
        <BLANKLINE>
        #define KEY_CTRL 0x0000001D
        <BLANKLINE>
        <BLANKLINE>
    """

    def __init__(self):
        self._parts: list[str] = [PREAMBLE]
        self.function_count = 0
        self.constant_count = 0

    def add_comment(self, text: str) -> None:
        self._parts.append(render_comment(text))

    def add_constant(self, name: str, value: int) -> None:
        self._parts.append(render_constant(name, value))
        self.constant_count += 1

    def add_function(self, signature: Signature) -> None:
        logger.debug(
            f"Rendering {signature.name} at {format_hex(signature.address)}: "
            f"{len(signature.inputs)} in, {len(signature.outputs)} out"
        )
        self._parts.append(render_function(signature))
        self._parts.append("\n")
        self.function_count += 1

    def render(self) -> str:
        """Return the complete header text."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.render()


# =============================================================================
# Primitives Header
# =============================================================================

def generate_call_header() -> str:
    """
    Generate call.h, the register primitives used by generated wrappers.

    The macros target the fox32 GCC port:

    - ``parameter(i, p)`` moves a C value into register x<i>
    - ``ret(i, var)`` moves register x<i> into a C variable
    - ``call(addr)`` pushes a unique return label, loads the jump-table
      address and jumps through it. ``__COUNTER__`` keeps the labels of
      several calls in one function distinct.

    Returns:
        call.h content as a string
    """
    lines = [
        "#pragma once",
        "",
        "#define STR2(x) #x",
        "#define STR(x) STR2(x)",
        "",
        "#define _call2(c, jt_addr)           \\",
        '    asm("li a0,ret_" #c "\\n"         \\',
        '        "addi sp,sp,-4\\n"            \\',
        '        "sw a0,0(sp)\\n"              \\',
        '        "li a0,[" STR(jt_addr) "]\\n" \\',
        '        "jr a0\\n"                    \\',
        '        "ret_" #c ":"                \\',
        '        ::: "a0"                     \\',
        "    );",
        "#define _call(c, jt_addr) _call2(c, jt_addr)",
        "#define call(jt_addr) _call(__COUNTER__, jt_addr)",
        "",
        '#define parameter(i, p) asm("mv x" #i ",%0" :: "r" (p) : "x" #i)',
        "",
        '#define ret(i, var) asm("mv %0,x" #i : "=r" (var) :: "x" #i)',
    ]
    return "\n".join(lines) + "\n"
