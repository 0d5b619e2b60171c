# Machine geometry
REGISTER_COUNT = 13     # R0..R12
MEMORY_SIZE = 255       # Addresses 0..254
BYTE_MODULUS = 256      # Every stored value wraps into 0..255
BYTE_BITS = 8           # Shift width that clears a byte
