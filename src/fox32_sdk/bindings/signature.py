"""
Jump-Table Signatures
=====================

A Signature describes the calling convention of one fox32 jump-table
entry: the address to call, the name of the generated C wrapper, and
which register slots carry its parameters and return values.

Register Slots
--------------
The fox32 passes values in registers, so every parameter and return
value is tied to a slot index (0-31). Slot numbers are part of the ABI:
``parameter(2, ...)`` must end up in r2 no matter how many other
parameters the call takes. For that reason a Signature stores two
fixed 32-entry slot lists rather than plain lists of variables, and a
declaration can either take the lowest free slot or name one explicitly:

    >>> sig = (
    ...     Signature(0xF0049004, "random_range")
    ...     .add_parameter(WORD, "minimum", slot=1)
    ...     .add_parameter(WORD, "maximum", slot=2)
    ...     .add_return(WORD)
    ... )
    >>> [r.index for r in sig.inputs]
    [1, 2]
    >>> sig.return_type
    CType('unsigned int')

Declaring a slot twice silently replaces the earlier variable.
"""

from dataclasses import dataclass
from typing import Optional

from fox32_sdk.bindings.types import CType, Variable, VOID
from fox32_sdk.errors import SlotCapacityError, SlotIndexError


# Number of register slots available for parameters and for return values
SLOT_COUNT = 32


@dataclass(frozen=True)
class Register:
    """
    A populated slot: the register index and the variable it carries.

    Attributes:
        index: Register slot number (0-31)
        variable: The variable staged into or read from that register
    """
    index: int
    variable: Variable


class Signature:
    """
    Calling convention of one jump-table entry.

    Attributes:
        address: 32-bit jump-table address the wrapper calls
        name: Name of the generated C function
        parameters: 32 input slots, each None or a Variable
        returns: 32 output slots, each None or a Variable
    """

    def __init__(self, address: int, name: str):
        self.address = address
        self.name = name
        self.parameters: list[Optional[Variable]] = [None] * SLOT_COUNT
        self.returns: list[Optional[Variable]] = [None] * SLOT_COUNT

    # -------------------------------------------------------------------------
    # Declaration
    # -------------------------------------------------------------------------

    def add_parameter(
        self,
        type: CType,
        name: str,
        slot: Optional[int] = None,
    ) -> "Signature":
        """
        Declare an input parameter.

        Args:
            type: C type of the parameter
            name: C identifier of the parameter
            slot: Register slot, or None for the lowest free slot

        Returns:
            This signature, so declarations can be chained

        Raises:
            SlotIndexError: If slot is outside 0-31
            SlotCapacityError: If slot is None and every slot is taken
        """
        if slot is None:
            slot = self._first_free(self.parameters, "parameter")
        self._check_slot(slot)
        self.parameters[slot] = Variable(type, name)
        return self

    def add_return(self, type: CType, slot: Optional[int] = None) -> "Signature":
        """
        Declare a return value, named result_<slot>.

        Args:
            type: C type of the value
            slot: Register slot, or None for the lowest free slot

        Returns:
            This signature, so declarations can be chained

        Raises:
            SlotIndexError: If slot is outside 0-31
            SlotCapacityError: If slot is None and every slot is taken
        """
        if slot is None:
            slot = self._first_free(self.returns, "return")
        self._check_slot(slot)
        self.returns[slot] = Variable(type, f"result_{slot}")
        return self

    def _first_free(self, slots: list[Optional[Variable]], kind: str) -> int:
        for index, variable in enumerate(slots):
            if variable is None:
                return index
        raise SlotCapacityError(kind, self.name)

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < SLOT_COUNT:
            raise SlotIndexError(slot, self.name)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def inputs(self) -> list[Register]:
        """Populated parameter slots in ascending slot order."""
        return _populated(self.parameters)

    @property
    def outputs(self) -> list[Register]:
        """Populated return slots in ascending slot order."""
        return _populated(self.returns)

    @property
    def result(self) -> Optional[Register]:
        """The lowest populated return slot, which the wrapper returns."""
        outputs = self.outputs
        return outputs[0] if outputs else None

    @property
    def return_type(self) -> CType:
        """C return type of the wrapper (void when nothing is returned)."""
        result = self.result
        return result.variable.type if result else VOID

    def __repr__(self) -> str:
        return (
            f"Signature(0x{self.address:08X}, {self.name!r}, "
            f"inputs={len(self.inputs)}, outputs={len(self.outputs)})"
        )


def _populated(slots: list[Optional[Variable]]) -> list[Register]:
    return [
        Register(index, variable)
        for index, variable in enumerate(slots)
        if variable is not None
    ]
