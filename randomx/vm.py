"""Virtual machine environment and instruction decoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence

from randomx.helpers import f64_from_u64, float_mask
from randomx.parameters import (
    RANDOMX_CACHE_LINE_SIZE,
    RANDOMX_DATASET_EXTRA_ITEMS,
    RANDOMX_PROGRAM_ITERATIONS,
)

_U32_MASK = (1 << 32) - 1
_CONFIGURATION_WORDS = 16

# An encoded instruction is a 64-bit word laid out as:
#   63         32       24      16       8         0
#   |  imm32    |    mod |   src |   dst |  opcode |


def imm32(i: int) -> int:
    """Return the 32-bit immediate value of an encoded instruction."""
    return (i >> 32) & _U32_MASK


def mod_(i: int) -> int:
    """Return the mod byte of an encoded instruction."""
    return (i >> 24) & 0xFF


def src(i: int) -> int:
    """Return the source register byte of an encoded instruction."""
    return (i >> 16) & 0xFF


def dst(i: int) -> int:
    """Return the destination register byte of an encoded instruction."""
    return (i >> 8) & 0xFF


def opcode(i: int) -> int:
    """Return the opcode byte of an encoded instruction."""
    return i & 0xFF


class Instruction(IntEnum):
    """The RandomX virtual machine instructions."""

    # Integer instructions
    IADD_RS = 0
    IADD_M = 1
    ISUB_R = 2
    ISUB_M = 3
    IMUL_R = 4
    IMUL_M = 5
    IMULH_R = 6
    IMULH_M = 7
    ISMULH_R = 8
    ISMULH_M = 9
    IMUL_RCP = 10
    INEG_R = 11
    IXOR_R = 12
    IXOR_M = 13
    IROR_R = 14
    IROL_R = 15
    ISWAP_R = 16
    # Floating point instructions
    FSWAP_R = 17
    FADD_R = 18
    FADD_M = 19
    FSUB_R = 20
    FSUB_M = 21
    FSCAL_R = 22
    FMUL_R = 23
    FDIV_M = 24
    FSQRT_R = 25
    # Control instructions
    CBRANCH = 26
    CFROUND = 27
    # Store instruction
    ISTORE = 28
    NOP = 29


@dataclass
class ProgramConfiguration:
    """Per-program configuration derived from the generator output."""

    emask: list[int] = field(default_factory=lambda: [0, 0])
    read_reg0: int = 0
    read_reg1: int = 0
    read_reg2: int = 0
    read_reg3: int = 0


@dataclass
class VMEnvironment:
    """State of the RandomX virtual machine.

    The A registers hold raw 64-bit patterns of doubles as ``[high, low]``
    pairs, since only their bytes matter.
    """

    program_buffer: list[int] = field(default_factory=list)
    r_registers: list[int] = field(default_factory=lambda: [0] * 8)
    f_registers: list[float] = field(default_factory=lambda: [0.0] * 4)
    e_registers: list[float] = field(default_factory=lambda: [0.0] * 4)
    a_registers: list[list[int]] = field(default_factory=lambda: [[0, 0] for _ in range(4)])
    configuration: ProgramConfiguration = field(default_factory=ProgramConfiguration)
    ma: int = 0
    """Memory address of the next dataset read."""
    mx: int = 0
    """Memory address of the next dataset prefetch."""
    dataset_offset: int = 0
    fprc: list[bool] = field(default_factory=lambda: [False, False])
    ic: int = RANDOMX_PROGRAM_ITERATIONS
    sp_addr0: int = 0
    sp_addr1: int = 0
    scratchpad: bytearray = field(default_factory=bytearray)

    @classmethod
    def from_configuration(cls, config: Sequence[int]) -> VMEnvironment:
        """Build an environment from sixteen 64-bit configuration words."""
        config = list(config)
        if len(config) != _CONFIGURATION_WORDS:
            raise ValueError(
                f"configuration must hold {_CONFIGURATION_WORDS} words, got {len(config)}"
            )
        a_values = [f64_from_u64(word) for word in config[:8]]
        a_registers = [[a_values[k + 1], a_values[k]] for k in range(0, 8, 2)]

        ma = config[8] & _U32_MASK
        mx = config[10] & _U32_MASK
        flags = config[12]
        configuration = ProgramConfiguration(
            emask=[float_mask(config[14]), float_mask(config[15])],
            read_reg0=flags & 1,
            read_reg1=flags & 2,
            read_reg2=flags & 4,
            read_reg3=flags & 8,
        )
        dataset_offset = (config[13] % (RANDOMX_DATASET_EXTRA_ITEMS + 1)) * RANDOMX_CACHE_LINE_SIZE
        return cls(
            a_registers=a_registers,
            configuration=configuration,
            ma=ma,
            mx=mx,
            dataset_offset=dataset_offset,
            sp_addr0=mx,
            sp_addr1=ma,
        )