"""
fox32 C Bindings
================

This package generates ``fox32.h``, a C header of inline wrappers for the
fox32rom and fox32os jump tables, together with the ``call.h`` register
primitives those wrappers rely on.

Overview
--------
**types.py**: C types and variables
    - CType with the predefined VOID, BYTE, IBYTE, HALF, IHALF, WORD, IWORD
    - ``.ref`` for pointer types

**signature.py**: Jump-table signatures
    - Signature with 32 parameter and 32 return register slots
    - Register (slot index + variable) views of populated slots

**emitter.py**: C text generation
    - render_function / render_constant / render_comment
    - Document, the output buffer with the fixed preamble
    - generate_call_header for call.h

**table.py**: The fox32 binding table
    - BINDINGS_TABLE of Heading, Constant and FunctionEntry rows
    - generate_bindings_header, lookups and an optional consistency check

Quick Start
-----------
Generate the header:
    >>> from fox32_sdk.bindings import generate_bindings_header
    >>> with open("fox32.h", "w") as f:
    ...     f.write(generate_bindings_header())

Render one wrapper by hand:
    >>> from fox32_sdk.bindings import Signature, WORD, render_function
    >>> sig = Signature(0xF0049000, "random").add_return(WORD)
    >>> print(render_function(sig))
    static inline unsigned int random(void) {
        unsigned int result_0;
        call(0xF0049000);
        ret(0, result_0);
        return result_0;
    }
    <BLANKLINE>
"""

from fox32_sdk.bindings.types import (
    CType,
    Variable,
    VOID,
    BYTE,
    IBYTE,
    HALF,
    IHALF,
    WORD,
    IWORD,
)

from fox32_sdk.bindings.signature import (
    SLOT_COUNT,
    Register,
    Signature,
)

from fox32_sdk.bindings.emitter import (
    CALL_HEADER_NAME,
    PREAMBLE,
    Document,
    format_hex,
    render_function,
    render_constant,
    render_comment,
    generate_call_header,
)

from fox32_sdk.bindings.table import (
    # Entry types
    Param,
    Result,
    Heading,
    Constant,
    FunctionEntry,
    TableEntry,

    # Data
    BINDINGS_TABLE,

    # Functions
    get_function,
    get_function_by_address,
    get_constant,
    get_all_function_names,
    check_table,
    build_document,
    generate_bindings_header,
)

__all__ = [
    # Types
    "CType",
    "Variable",
    "VOID",
    "BYTE",
    "IBYTE",
    "HALF",
    "IHALF",
    "WORD",
    "IWORD",

    # Signatures
    "SLOT_COUNT",
    "Register",
    "Signature",

    # Emission
    "CALL_HEADER_NAME",
    "PREAMBLE",
    "Document",
    "format_hex",
    "render_function",
    "render_constant",
    "render_comment",
    "generate_call_header",

    # Table
    "Param",
    "Result",
    "Heading",
    "Constant",
    "FunctionEntry",
    "TableEntry",
    "BINDINGS_TABLE",
    "get_function",
    "get_function_by_address",
    "get_constant",
    "get_all_function_names",
    "check_table",
    "build_document",
    "generate_bindings_header",
]
