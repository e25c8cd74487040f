"""Building blocks of the RandomX proof-of-work function.

AES generators and hash, a Blake2b byte generator, floating-point register
helpers, VM environment setup and SuperscalarHash instruction types.
"""

__version__ = "0.1.0"