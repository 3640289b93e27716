"""Legacy-compatible STEPN login token (checksum-seeded shuffle + 6-bit packing)."""

from .checksum import hash_code
from .random_utils import JavaRandom, fisher_yates_shuffle, initial_scramble
from .encoding import ENCODE_CHARS, BitWindow, encode
from .password import (
    SALT,
    SEPARATOR,
    ClockError,
    build_buffer,
    check_timestamp,
    current_millis,
    encode_with_seed,
    hash_password,
)
from .batch import hash_frame
from .statistics import BiasReport, draw_frequencies, modulo_bias
