"""C++ code generation for parsed Dekhao programs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from dekhao.ast import Declaration, PrintStatement, Program, Statement, UnrecognizedLine


CPP_TYPES: Dict[str, str] = {
    "integer": "int",
    "float": "float",
    "string": "std::string",
}

DEFAULT_INDENT = "    "


def cpp_type(type_keyword: str) -> str:
    """Map a Dekhao type keyword to its C++ type; unknown names pass through."""
    return CPP_TYPES.get(type_keyword, type_keyword)


@dataclass
class EmissionContext:
    """Per-run feature flags gathered while emitting statements."""

    uses_string: bool = False
    uses_float: bool = False


class CppEmitter:
    """Turns statements into lines of C++ and assembles the program."""

    def __init__(self, *, indent: str = DEFAULT_INDENT) -> None:
        self.indent = indent

    def emit_statement(self, statement: Statement, context: EmissionContext) -> Optional[str]:
        if isinstance(statement, PrintStatement):
            return self.emit_print(statement)
        if isinstance(statement, Declaration):
            return self.emit_declaration(statement, context)
        if isinstance(statement, UnrecognizedLine):
            return None
        raise TypeError(f"Unsupported statement: {type(statement).__name__}")

    def emit_print(self, statement: PrintStatement) -> str:
        parts = ["std::cout"]
        parts.extend(statement.arguments)
        parts.append("std::endl;")
        return " << ".join(parts)

    def emit_declaration(self, statement: Declaration, context: EmissionContext) -> str:
        if statement.type_keyword == "string":
            context.uses_string = True
        if statement.type_keyword == "float":
            context.uses_float = True
        return f"{cpp_type(statement.type_keyword)} {statement.name} = {statement.initializer};"

    def emit_body(self, program: Program, context: EmissionContext) -> List[str]:
        body: List[str] = []
        for statement in program.statements:
            line = self.emit_statement(statement, context)
            if line is not None:
                body.append(line)
        return body

    def assemble(self, body: List[str], context: EmissionContext) -> str:
        lines = ["#include <iostream>"]
        if context.uses_string:
            lines.append("#include <string>")
        lines.append("using namespace std;")
        lines.append("")
        lines.append("int main() {")
        lines.extend(f"{self.indent}{line}" for line in body)
        lines.append(f"{self.indent}return 0;")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def generate(self, program: Program, context: Optional[EmissionContext] = None) -> str:
        context = context if context is not None else EmissionContext()
        body = self.emit_body(program, context)
        return self.assemble(body, context)


def generate_cpp(program: Program, *, indent: str = DEFAULT_INDENT) -> str:
    """Generate a complete C++ translation unit for ``program``."""
    return CppEmitter(indent=indent).generate(program)


__all__ = [
    "CPP_TYPES",
    "DEFAULT_INDENT",
    "cpp_type",
    "EmissionContext",
    "CppEmitter",
    "generate_cpp",
]
