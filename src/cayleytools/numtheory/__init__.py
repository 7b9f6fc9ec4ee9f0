from .divisors import prime_factors, divisors, multiplicity, int_pow

__all__ = [
    "prime_factors",
    "divisors",
    "multiplicity",
    "int_pow",
]
