# randomx

Pure-Python building blocks of the RandomX proof-of-work algorithm.

## What is included

- `randomx.parameters`: the RandomX constants. These include the Argon2 settings, the dataset and scratchpad sizes, the instruction frequencies, and the AES keys and initial states.
- `randomx.aes`: `aes_generator_1r`, `aes_generator_4r` and `aes_hash1r`.
  - Each takes a 64-byte value and returns 64 bytes.
  - Each raises `ValueError` for any other length.
- `randomx.blake_generator`: `BlakeGenerator(seed, nonce)`, a byte stream driven by repeated Blake2b-512 hashing.
  - The internal state is the seed (up to 60 bytes, zero-padded) followed by the nonce as four little-endian bytes.
  - A longer seed raises `ValueError`.
  - `get_byte()` returns the next byte. `get_u32()` returns the next four bytes as a big-endian integer.
  - When the remaining bytes are too few for a request, `update_state()` replaces the state with its digest.
- `randomx.helpers`: `f64_from_u64`, `static_exponent` and `float_mask`.
  - They build the bit patterns of the VM's floating-point register values.
  - They accept unsigned 64-bit integers only and raise `ValueError` otherwise.
- `randomx.vm`:
  - Field extraction from 64-bit instruction words: `imm32`, `mod_`, `src`, `dst` and `opcode`.
  - The `Instruction` enumeration.
  - `ProgramConfiguration`.
  - `VMEnvironment`. `VMEnvironment.from_configuration` builds it from sixteen 64-bit configuration words and raises `ValueError` for any other count.
- `randomx.superscalar`: `SuperscalarInstructionType` (with `is_multiplication()`) and the `ExecutionPort` flags.

## Installation

```
pip install .
```

## Usage

```python
from randomx.aes import aes_generator_1r, aes_hash1r
from randomx.blake_generator import BlakeGenerator
from randomx.vm import VMEnvironment

state = aes_generator_1r(bytes(64))
digest = aes_hash1r(state)

gen = BlakeGenerator(b"test key 000", 0)
first = gen.get_byte()          # 216

env = VMEnvironment.from_configuration([0] * 16)
print(env.a_registers, env.configuration.emask)
```

Register values and masks are the raw 64-bit patterns of IEEE-754 doubles, held as Python integers. Each A register is a `[high, low]` pair.

## What this package does not do

This package does not compute RandomX hashes. In particular it has none of the following:

- Argon2d cache initialisation.
- Dataset construction.
- SuperscalarHash program generation.
- A VM interpreter that runs programs.

`aes_hash1r` handles exactly one 64-byte block. The package has no command-line interface.

## Running the tests

```
pip install .[test]
pytest
```