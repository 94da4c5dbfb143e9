"""Cairo source of the hints implemented natively in this package.

The processor dispatches on the exact hint text, so these strings must match
the compiled program byte for byte.
"""

NORMALIZE_ADDRESS_SET_IS_SMALL_HINT = """# Verify the assumptions on the relationship between 2**250, ADDR_BOUND and PRIME.
ADDR_BOUND = ids.ADDR_BOUND % PRIME
assert (2**250 < ADDR_BOUND <= 2**251) and (2 * 2**250 < PRIME) and (
        ADDR_BOUND * 2 > PRIME), \\
    'normalize_address() cannot be used with the current constants.'
ids.is_small = 1 if ids.addr < ADDR_BOUND else 0"""

NORMALIZE_ADDRESS_SET_IS_250_HINT = "ids.is_250 = 1 if ids.addr < 2**250 else 0"

ALON_HINT = """a = (ids.a.high << 128) + ids.a.low
div = (ids.div.high << 128) + ids.div.low
quotient, remainder = divmod(a, div)

ids.quotient.low = quotient & ((1 << 128) - 1)
ids.quotient.high = quotient >> 128
ids.remainder.low = remainder & ((1 << 128) - 1)
ids.remainder.high = remainder >> 128"""
