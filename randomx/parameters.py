"""Constants that define the RandomX algorithm."""

# Cache (Argon2d) configuration
RANDOMX_ARGON_MEMORY = 262144
"""Number of 1 KiB Argon2 blocks in the cache."""
RANDOMX_ARGON_ITERATIONS = 3
"""Number of Argon2d iterations for cache initialisation."""
RANDOMX_ARGON_LANES = 1
"""Number of parallel lanes for cache initialisation."""
RANDOMX_ARGON_BLOCK_SIZE = 1024
RANDOMX_ARGON_SALT = b"RandomX\x03"

RANDOMX_CACHE_ACCESSES = 8
"""Number of random cache accesses per dataset item."""

RANDOMX_SUPERSCALAR_LATENCY = 170
"""Target latency for SuperscalarHash, in cycles of the reference CPU."""
RANDOMX_SUPERSCALAR_MAX_SIZE = 3 * RANDOMX_SUPERSCALAR_LATENCY + 2

# Dataset configuration
RANDOMX_DATASET_BASE_SIZE = 2147483648
RANDOMX_DATASET_EXTRA_SIZE = 33554368
RANDOMX_DATASET_INDEX_SIZE = 64
RANDOMX_DATASET_EXTRA_ITEMS = RANDOMX_DATASET_EXTRA_SIZE // RANDOMX_DATASET_INDEX_SIZE

RANDOMX_CACHE_LINE_SIZE = RANDOMX_DATASET_INDEX_SIZE
RANDOMX_CACHE_LINE_ASSIGN_MASK = (RANDOMX_DATASET_BASE_SIZE - 1) & ~RANDOMX_CACHE_LINE_SIZE
RANDOMX_CACHE_SIZE = RANDOMX_ARGON_MEMORY * RANDOMX_ARGON_BLOCK_SIZE

# Program configuration
RANDOMX_PROGRAM_SIZE = 256
RANDOMX_PROGRAM_ITERATIONS = 2048
RANDOMX_PROGRAM_COUNT = 8

RANDOMX_JUMP_BITS = 8
RANDOMX_JUMP_OFFSET = 8

# Scratchpad
RANDOMX_SCRATCHPAD_L3 = 2097152
RANDOMX_SCRATCHPAD_L2 = 262144
RANDOMX_SCRATCHPAD_L1 = 16384

# AesGenerator1R keys: Hash512("RandomX AesGenerator1R keys")
AES_GENERATOR_1R_K0 = bytes.fromhex("53a5ac6d096671622b55b5db1749f4b4")
AES_GENERATOR_1R_K1 = bytes.fromhex("07af7c6d0d716a8478d325174edca10d")
AES_GENERATOR_1R_K2 = bytes.fromhex("f162123fc67e949f4f79c0f445e3203e")
AES_GENERATOR_1R_K3 = bytes.fromhex("3581ef6a7c31bab1884c311654911649")

# AesGenerator4R keys
AES_GENERATOR_4R_K0 = bytes.fromhex("ddaa2164db3d83d12b6d542f3fd2e599")
AES_GENERATOR_4R_K1 = bytes.fromhex("50340eb2553f91b6539df706e5cddfa5")
AES_GENERATOR_4R_K2 = bytes.fromhex("04d93e5caf7b5e519f67a40abf021c17")
AES_GENERATOR_4R_K3 = bytes.fromhex("63376285085d8fe7853767cd91d2ded8")
AES_GENERATOR_4R_K4 = bytes.fromhex("736f82b5a6a7d6e36d8b513db4ff9e22")
AES_GENERATOR_4R_K5 = bytes.fromhex("f36b56c7d9b3109c4e4d02e9d2b772b2")
AES_GENERATOR_4R_K6 = bytes.fromhex("e7c973f28ba365f70a66a92ba7ef3bf6")
AES_GENERATOR_4R_K7 = bytes.fromhex("09d67c7ade395891fdd1060c2d76b0c0")

# AesHash1R initial state and extra keys
AES_HASH1R_STATE0 = bytes.fromhex("0d2cb592de56a89f47db82ccad3a98d7")
AES_HASH1R_STATE1 = bytes.fromhex("6e998d3398b7c7155a129ef55780e7ac")
AES_HASH1R_STATE2 = bytes.fromhex("1700776ad0c762ae6b507950e47ca0e8")
AES_HASH1R_STATE3 = bytes.fromhex("0c240a638d82ad070500a1794849997e")
AES_HASH1R_XKEY0 = bytes.fromhex("8983faf69f94248bbf56dc9001028906")
AES_HASH1R_XKEY1 = bytes.fromhex("d163b2613ce0f451c64310ee9bf918ed")

BLAKE_GENERATOR_SEED_MAX_SIZE = 60

# Instruction frequencies: integer instructions
RANDOMX_FREQ_IADD_RS = 16
RANDOMX_FREQ_IADD_M = 7
RANDOMX_FREQ_ISUB_R = 16
RANDOMX_FREQ_ISUB_M = 7
RANDOMX_FREQ_IMUL_R = 16
RANDOMX_FREQ_IMUL_M = 4
RANDOMX_FREQ_IMULH_R = 4
RANDOMX_FREQ_IMULH_M = 1
RANDOMX_FREQ_ISMULH_R = 4
RANDOMX_FREQ_ISMULH_M = 1
RANDOMX_FREQ_IMUL_RCP = 8
RANDOMX_FREQ_INEG_R = 2
RANDOMX_FREQ_IXOR_R = 15
RANDOMX_FREQ_IXOR_M = 5
RANDOMX_FREQ_IROR_R = 8
RANDOMX_FREQ_IROL_R = 2
RANDOMX_FREQ_ISWAP_R = 4

# Floating point instructions
RANDOMX_FREQ_FSWAP_R = 4
RANDOMX_FREQ_FADD_R = 16
RANDOMX_FREQ_FADD_M = 5
RANDOMX_FREQ_FSUB_R = 16
RANDOMX_FREQ_FSUB_M = 5
RANDOMX_FREQ_FSCAL_R = 6
RANDOMX_FREQ_FMUL_R = 32
RANDOMX_FREQ_FDIV_M = 4
RANDOMX_FREQ_FSQRT_R = 6

# Control instructions
RANDOMX_FREQ_CBRANCH = 25
RANDOMX_FREQ_CFROUND = 1

# Store instruction
RANDOMX_FREQ_ISTORE = 16

# No-op instruction
RANDOMX_FREQ_NOP = 0

# Floating point layout
FLOAT_MANTISSA_SIZE = 52
FLOAT_EXPONENT_SIZE = 11
FLOAT_MANTISSA_MASK = (1 << FLOAT_MANTISSA_SIZE) - 1
FLOAT_EXPONENT_MASK = (1 << FLOAT_EXPONENT_SIZE) - 1

RANDOMX_CONST_EXPONENT_BITS = 0x300
RANDOMX_STATIC_EXPONENT_BITS = 4
RANDOMX_DYNAMIC_EXPONENT_BITS = 4