"""AES based generators and hash used by RandomX."""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from randomx import parameters as p

_COLUMN = 16
_STATE_SIZE = 64


def _encrypt(key: bytes, block: bytes) -> bytes:
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(block) + encryptor.finalize()


def _decrypt(key: bytes, block: bytes) -> bytes:
    decryptor = Cipher(algorithms.AES(key), modes.ECB()).decryptor()
    return decryptor.update(block) + decryptor.finalize()


def _columns(data: bytes, what: str) -> list[bytes]:
    data = bytes(data)
    if len(data) != _STATE_SIZE:
        raise ValueError(f"{what} must be {_STATE_SIZE} bytes, got {len(data)}")
    return [data[i:i + _COLUMN] for i in range(0, _STATE_SIZE, _COLUMN)]


def _chain(op, keys, block: bytes) -> bytes:
    for key in keys:
        block = op(key, block)
    return block


def aes_generator_1r(state: bytes) -> bytes:
    """Run one AesGenerator1R iteration over a 64-byte state.

    Columns 0 and 2 are decrypted, columns 1 and 3 encrypted, each with its
    own key. The result is also the next state.
    """
    s0, s1, s2, s3 = _columns(state, "state")
    return b"".join(
        (
            _decrypt(p.AES_GENERATOR_1R_K0, s0),
            _encrypt(p.AES_GENERATOR_1R_K1, s1),
            _decrypt(p.AES_GENERATOR_1R_K2, s2),
            _encrypt(p.AES_GENERATOR_1R_K3, s3),
        )
    )


def aes_generator_4r(state: bytes) -> bytes:
    """Run one AesGenerator4R iteration over a 64-byte state.

    Columns 0 and 1 use keys 0-3, columns 2 and 3 use keys 4-7.
    """
    s0, s1, s2, s3 = _columns(state, "state")
    low_keys = (
        p.AES_GENERATOR_4R_K0,
        p.AES_GENERATOR_4R_K1,
        p.AES_GENERATOR_4R_K2,
        p.AES_GENERATOR_4R_K3,
    )
    high_keys = (
        p.AES_GENERATOR_4R_K4,
        p.AES_GENERATOR_4R_K5,
        p.AES_GENERATOR_4R_K6,
        p.AES_GENERATOR_4R_K7,
    )
    return b"".join(
        (
            _chain(_decrypt, low_keys, s0),
            _chain(_encrypt, low_keys, s1),
            _chain(_decrypt, high_keys, s2),
            _chain(_encrypt, high_keys, s3),
        )
    )


def aes_hash1r(block: bytes) -> bytes:
    """Hash a single 64-byte block with AesHash1R.

    The block columns key the initial state columns, then two final rounds
    with the extra keys are applied.
    """
    k0, k1, k2, k3 = _columns(block, "block")
    state0 = _decrypt(k0, p.AES_HASH1R_STATE0)
    state1 = _encrypt(k1, p.AES_HASH1R_STATE1)
    state2 = _decrypt(k2, p.AES_HASH1R_STATE2)
    state3 = _encrypt(k3, p.AES_HASH1R_STATE3)

    final_keys = (p.AES_HASH1R_XKEY0, p.AES_HASH1R_XKEY1)
    return b"".join(
        (
            _chain(_encrypt, final_keys, state0),
            _chain(_decrypt, final_keys, state1),
            _chain(_encrypt, final_keys, state2),
            _chain(_decrypt, final_keys, state3),
        )
    )