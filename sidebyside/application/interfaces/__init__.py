"""Application interfaces (ports): service protocols.

Define contracts that services depend on instead of concrete classes.
"""

from sidebyside.application.interfaces.services import IResultsFingerprintService

__all__ = [
    "IResultsFingerprintService",
]
