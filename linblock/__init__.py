"""Binary linear block codes: generator matrices, codec, parity-check matrices."""

from .code import GeneratorMatrix, ParityCheckMatrix

__all__ = ["GeneratorMatrix", "ParityCheckMatrix"]
