import torch
from typing import Optional
from contextlib import contextmanager

from DynamicBuffer.utils.logging import get_logger


_device: Optional[torch.device] = None

def get_device() -> torch.device:
    global _device

    if _device is None:
        if torch.cuda.is_available():
            _device = torch.device('cuda')
            get_logger().info(f"CUDA GPU detected: {torch.cuda.get_device_name(0)}, decoded tensors go to 'cuda'")
        else:
            _device = torch.device('cpu')
            get_logger().info("CUDA GPU not detected. Using 'cpu'.")

    return _device

@contextmanager
def DeviceContext(device: torch.device):
    global _device
    previous_device = _device
    _device = device
    try:
        yield
    finally:
        _device = previous_device
