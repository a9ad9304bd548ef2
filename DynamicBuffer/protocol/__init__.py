from DynamicBuffer.protocol.stream import CodeUnitStream

__all__ = [
    "CodeUnitStream",
]
