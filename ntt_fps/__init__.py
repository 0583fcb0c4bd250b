"""ntt_fps - NTT convolution and formal power series over GF(998244353)."""

from ntt_fps.factorial import factorial_tables, inverse_table
from ntt_fps.field import (
    FF,
    MOD,
    PRIMITIVE_ROOT,
    add,
    as_field,
    div,
    inverse,
    modint,
    mul,
    neg,
    power,
    sub,
    value,
)
from ntt_fps.fps import FPS
from ntt_fps.ntt import (
    IRATE,
    MAX_TRANSFORM_BITS,
    RATE,
    convolution,
    intt,
    ntt,
)

__all__ = [
    # Field
    "FF",
    "MOD",
    "PRIMITIVE_ROOT",
    "modint",
    "value",
    "as_field",
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "power",
    "inverse",
    # NTT
    "RATE",
    "IRATE",
    "MAX_TRANSFORM_BITS",
    "ntt",
    "intt",
    "convolution",
    # Factorials
    "factorial_tables",
    "inverse_table",
    # Power series
    "FPS",
]
