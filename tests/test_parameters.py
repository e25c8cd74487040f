import hashlib
import struct

from randomx import parameters as p
from randomx.aes import aes_generator_1r, aes_generator_4r
from randomx.blake_generator import BlakeGenerator
from randomx.helpers import f64_from_u64
from randomx.vm import Instruction, VMEnvironment


def _blake2b(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=64).digest()


def test_aesgenerator_1r_key_consistency():
    res = _blake2b(b"RandomX AesGenerator1R keys")
    assert res[0:16] == p.AES_GENERATOR_1R_K0
    assert res[16:32] == p.AES_GENERATOR_1R_K1
    assert res[32:48] == p.AES_GENERATOR_1R_K2
    assert res[48:64] == p.AES_GENERATOR_1R_K3
    assert p.AES_GENERATOR_1R_K0 == bytes(
        [0x53, 0xA5, 0xAC, 0x6D, 0x09, 0x66, 0x71, 0x62,
         0x2B, 0x55, 0xB5, 0xDB, 0x17, 0x49, 0xF4, 0xB4]
    )
    # Column 0 is a decryption of the zero block under key0.
    output = aes_generator_1r(bytes(64))
    assert output[0:16] == bytes(
        [202, 211, 173, 142, 251, 44, 222, 33, 36, 58, 219, 164, 0, 30, 149, 104]
    )


def test_aesgenerator_4r_key_consistency():
    res = _blake2b(b"RandomX AesGenerator4R keys 0-3")
    assert res[0:16] == p.AES_GENERATOR_4R_K0
    assert res[16:32] == p.AES_GENERATOR_4R_K1
    assert res[32:48] == p.AES_GENERATOR_4R_K2
    assert res[48:64] == p.AES_GENERATOR_4R_K3

    res = _blake2b(b"RandomX AesGenerator4R keys 4-7")
    assert res[0:16] == p.AES_GENERATOR_4R_K4
    assert res[16:32] == p.AES_GENERATOR_4R_K5
    assert res[32:48] == p.AES_GENERATOR_4R_K6
    assert res[48:64] == p.AES_GENERATOR_4R_K7
    assert p.AES_GENERATOR_4R_K7 == bytes(
        [0x09, 0xD6, 0x7C, 0x7A, 0xDE, 0x39, 0x58, 0x91,
         0xFD, 0xD1, 0x06, 0x0C, 0x2D, 0x76, 0xB0, 0xC0]
    )

    # Columns 0 and 2 share the same direction but use different key sets,
    # so identical inputs give different outputs.
    block = bytes(range(16))
    output = aes_generator_4r(block * 4)
    assert output[0:16] != output[32:48]
    assert output[16:32] != output[48:64]
    assert len(output) == 64


def test_instruction_frequencies_fill_all_opcodes():
    frequencies = {
        "IADD_RS": p.RANDOMX_FREQ_IADD_RS,
        "IADD_M": p.RANDOMX_FREQ_IADD_M,
        "ISUB_R": p.RANDOMX_FREQ_ISUB_R,
        "ISUB_M": p.RANDOMX_FREQ_ISUB_M,
        "IMUL_R": p.RANDOMX_FREQ_IMUL_R,
        "IMUL_M": p.RANDOMX_FREQ_IMUL_M,
        "IMULH_R": p.RANDOMX_FREQ_IMULH_R,
        "IMULH_M": p.RANDOMX_FREQ_IMULH_M,
        "ISMULH_R": p.RANDOMX_FREQ_ISMULH_R,
        "ISMULH_M": p.RANDOMX_FREQ_ISMULH_M,
        "IMUL_RCP": p.RANDOMX_FREQ_IMUL_RCP,
        "INEG_R": p.RANDOMX_FREQ_INEG_R,
        "IXOR_R": p.RANDOMX_FREQ_IXOR_R,
        "IXOR_M": p.RANDOMX_FREQ_IXOR_M,
        "IROR_R": p.RANDOMX_FREQ_IROR_R,
        "IROL_R": p.RANDOMX_FREQ_IROL_R,
        "ISWAP_R": p.RANDOMX_FREQ_ISWAP_R,
        "FSWAP_R": p.RANDOMX_FREQ_FSWAP_R,
        "FADD_R": p.RANDOMX_FREQ_FADD_R,
        "FADD_M": p.RANDOMX_FREQ_FADD_M,
        "FSUB_R": p.RANDOMX_FREQ_FSUB_R,
        "FSUB_M": p.RANDOMX_FREQ_FSUB_M,
        "FSCAL_R": p.RANDOMX_FREQ_FSCAL_R,
        "FMUL_R": p.RANDOMX_FREQ_FMUL_R,
        "FDIV_M": p.RANDOMX_FREQ_FDIV_M,
        "FSQRT_R": p.RANDOMX_FREQ_FSQRT_R,
        "CBRANCH": p.RANDOMX_FREQ_CBRANCH,
        "CFROUND": p.RANDOMX_FREQ_CFROUND,
        "ISTORE": p.RANDOMX_FREQ_ISTORE,
        "NOP": p.RANDOMX_FREQ_NOP,
    }
    names = [Instruction(value).name for value in range(len(frequencies))]
    assert names == list(frequencies)
    assert sum(frequencies.values()) == 256


def test_dataset_extra_items_bound_the_offset():
    assert p.RANDOMX_DATASET_EXTRA_ITEMS == 524287
    assert p.RANDOMX_SUPERSCALAR_MAX_SIZE == 512
    assert p.RANDOMX_CACHE_SIZE == 268435456
    assert p.RANDOMX_CACHE_LINE_ASSIGN_MASK == 0x7FFFFFBF
    assert p.RANDOMX_ARGON_SALT == b"RandomX\x03"

    config = [0] * 16
    config[13] = p.RANDOMX_DATASET_EXTRA_ITEMS
    env = VMEnvironment.from_configuration(config)
    assert env.dataset_offset == p.RANDOMX_DATASET_EXTRA_SIZE

    config[13] = p.RANDOMX_DATASET_EXTRA_ITEMS + 1
    env = VMEnvironment.from_configuration(config)
    assert env.dataset_offset == 0


def test_float_masks():
    assert p.FLOAT_MANTISSA_MASK == 0xFFFFFFFFFFFFF
    assert p.FLOAT_EXPONENT_MASK == 0x7FF
    bits = f64_from_u64(0)
    assert struct.unpack(">d", bits.to_bytes(8, "big"))[0] == 1.0
    full = f64_from_u64(p.FLOAT_MANTISSA_MASK)
    assert full & p.FLOAT_MANTISSA_MASK == p.FLOAT_MANTISSA_MASK
    assert full >> p.FLOAT_MANTISSA_SIZE == 1023


def test_seed_of_maximum_size_is_accepted():
    seed = b"s" * p.BLAKE_GENERATOR_SEED_MAX_SIZE
    generator = BlakeGenerator(seed, 0)
    assert bytes(generator.data[:60]) == seed
    assert bytes(generator.data[60:64]) == bytes(4)