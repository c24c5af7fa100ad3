"""CPU backends for the Schur and Hessenberg decompositions."""

from pyschur.decomposition.backends.cpu import CPUHessenbergBackend, SchurEngine

__all__ = ["SchurEngine", "CPUHessenbergBackend"]
