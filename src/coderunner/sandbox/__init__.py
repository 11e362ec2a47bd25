"""Sandbox subsystem — isolated execution and output capture."""

from coderunner.sandbox.capture import OutputCapture
from coderunner.sandbox.node import NodeSandbox
from coderunner.sandbox.values import UNDEFINED, decode_value, format_value

__all__ = [
    "UNDEFINED",
    "NodeSandbox",
    "OutputCapture",
    "decode_value",
    "format_value",
]
