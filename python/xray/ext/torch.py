import logging

from xray.inspect.classifier import register_buffer_type, unregister_buffer_type
from xray.utils.py import _get_torch

_registered = []


def tensor_type_name(tensor) -> str:
    """Legacy tensor type name, e.g. ``FloatTensor`` or ``cuda.LongTensor``."""
    return tensor.type().split(".", 1)[-1]


def init():
    """Show torch tensors as binary buffers labelled with their tensor type."""
    torch = _get_torch()
    if torch.Tensor in _registered:
        return

    register_buffer_type(torch.Tensor, tensor_type_name)
    _registered.append(torch.Tensor)
    logging.getLogger(__name__).info(
        "Torch tensors registered as buffers (torch=%s)", torch.__version__
    )


def deinit():
    while _registered:
        unregister_buffer_type(_registered.pop())
