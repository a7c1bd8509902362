"""Code generators for Dekhao programs."""

from .cpp import CPP_TYPES, CppEmitter, EmissionContext, cpp_type, generate_cpp

__all__ = ["CPP_TYPES", "CppEmitter", "EmissionContext", "cpp_type", "generate_cpp"]
