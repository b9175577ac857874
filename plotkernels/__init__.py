"""Reference kernels for proof-of-space plot construction: pipeline primitives, radix sort, bucket offsets and Xs sort-and-pack."""

__version__ = "0.6.0"

__all__ = ["pipeline", "radix_sort", "offsets", "xs"]