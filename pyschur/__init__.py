"""
pyschur: real Schur decomposition in pure NumPy.

Householder reduction to Hessenberg form followed by the implicit
double-shift QR iteration, with deflation, iteration budgets and
exceptional shifts.

Submodules:
    decomposition: schur(), hessenberg(), SchurEngine
    core: exceptions, result envelope, validation, linear algebra primitives
"""

__version__ = "0.1.0"

from pyschur import decomposition
from pyschur.decomposition import schur, hessenberg

__all__ = [
    "__version__",
    "decomposition",
    "schur",
    "hessenberg",
]
