"""
The MODEL layer contains the data structures filled by the parser:
the header metadata and the harmonic coefficients, plus their HDF5 cache.
It has no knowledge of the text format.
"""
