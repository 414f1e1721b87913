"""
Framework Extensions

Overview
--------
This package teaches xray about third-party value types.

Responsibilities:
1.  Register framework buffer types (e.g., PyTorch tensors) with the classifier.
2.  Import the framework lazily, only when the extension is initialised.

Submodules:
- `torch`: PyTorch tensors shown as binary buffers.
"""
