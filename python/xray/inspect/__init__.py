"""
Value Inspection

Overview
--------
This package decides what a value "is" and which members it shows.

Responsibilities:
1.  Classify any value into one `Kind` and build its `Node` description.
2.  Enumerate members of functions and class instances, base classes first.
3.  Recognise binary buffer types, including registered third-party ones.

Public Interfaces:
- `classify`/`kind_of`: Value classification.
- `function_sniffer`/`instance_sniffer`: Member enumeration.
- `register_buffer_type`/`unregister_buffer_type`: Extra buffer types.
"""

from .classifier import buffer_name
from .classifier import classify
from .classifier import entries
from .classifier import kind_of
from .classifier import register_buffer_type
from .classifier import unregister_buffer_type
from .sniffers import function_sniffer
from .sniffers import instance_sniffer
from .sniffers import member_value
