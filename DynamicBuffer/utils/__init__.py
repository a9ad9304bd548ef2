from DynamicBuffer.utils.device import get_device, DeviceContext
from DynamicBuffer.utils.logging import get_logger, DynamicBufferLogger
from DynamicBuffer.utils.timing import Timer, timing_context

__all__ = [
    "get_device",
    "DeviceContext",
    "get_logger",
    "DynamicBufferLogger",
    "Timer",
    "timing_context",
]
