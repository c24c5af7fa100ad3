"""Dense linear algebra primitives: Householder reflectors and Hessenberg reduction."""

from pyschur.core.compute.linalg.householder import Reflector
from pyschur.core.compute.linalg.hessenberg import HessenbergReducer

__all__ = ["Reflector", "HessenbergReducer"]
