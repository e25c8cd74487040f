"""Instruction types and execution ports of the SuperscalarHash program."""

from enum import IntEnum, IntFlag


class SuperscalarInstructionType(IntEnum):
    """Instructions available to SuperscalarHash programs."""

    ISUB_R = 0
    IXOR_R = 1
    IADD_RS = 2
    IMUL_R = 3
    IROR_C = 4
    IADD_C7 = 5
    IXOR_C7 = 6
    IADD_C8 = 7
    IXOR_C8 = 8
    IADD_C9 = 9
    IXOR_C9 = 10
    IMULH_R = 11
    ISMULH_R = 12
    IMUL_RCP = 13

    COUNT = 14
    INVALID = -1

    def is_multiplication(self) -> bool:
        """Return True for the instructions that use the multiplier."""
        return self in _MULTIPLICATIONS


_MULTIPLICATIONS = frozenset(
    {
        SuperscalarInstructionType.IMUL_R,
        SuperscalarInstructionType.IMULH_R,
        SuperscalarInstructionType.ISMULH_R,
        SuperscalarInstructionType.IMUL_RCP,
    }
)


class ExecutionPort(IntFlag):
    """Execution ports of the reference CPU."""

    NULL = 0
    P0 = 1
    P1 = 2
    P5 = 4
    P01 = 1 | 2
    P05 = 1 | 4
    P015 = 1 | 2 | 4